# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import string
from typing import Final

MAX_SESSION_NAME_LENGTH: Final = 32

# characters STS accepts in a role session name: [\w+=,.@-]
_VALID_SESSION_NAME_CHARS: Final = frozenset(
    string.ascii_letters + string.digits + "_+=,.@-"
)


def sanitize_session_name(text: str) -> str:
    return "".join(c if c in _VALID_SESSION_NAME_CHARS else "_" for c in text)


def generate_session_name(platform: str, container_id: str) -> str:
    """
    Build an STS role session name identifying a container, e.g. "docker-3f4e1a...".

    Invalid characters are replaced with underscores and the result is cut to at most
    32 characters. Shorter names are returned as-is.
    """
    session_name = sanitize_session_name(f"{platform}-{container_id}")
    return session_name[:MAX_SESSION_NAME_LENGTH]
