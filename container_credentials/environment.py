# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Optional

from container_credentials.util.app_env_utils import (
    AppEnvError,
    env_to_bool,
    env_to_optional_str,
)
from container_credentials.util.arn import RoleArn


@dataclass(frozen=True)
class ProviderEnv:
    user_agent_extra: str
    default_role_arn: RoleArn
    default_policy: Optional[str]
    enable_debug_logging: bool

    @staticmethod
    def from_env() -> "ProviderEnv":
        try:
            return ProviderEnv(
                user_agent_extra=environ["USER_AGENT_EXTRA"],
                default_role_arn=RoleArn.parse(environ.get("DEFAULT_IAM_ROLE", "")),
                default_policy=env_to_optional_str(environ.get("DEFAULT_IAM_POLICY")),
                enable_debug_logging=env_to_bool(environ.get("TRACE", "False")),
            )
        except ValueError as err:
            raise AppEnvError(f"Invalid default IAM role: {err}") from err
        except KeyError as err:
            raise AppEnvError(
                f"Missing required application environment variable: {err.args[0]}"
            ) from err
