# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Optional


class AppEnvError(RuntimeError):
    pass


def env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "yes"}


def env_to_optional_str(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value
