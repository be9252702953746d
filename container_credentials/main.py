# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from typing import TYPE_CHECKING, Final, Optional

from container_credentials import __version__
from container_credentials.environment import ProviderEnv
from container_credentials.observability.powertools_logging import (
    configured_log_level,
    powertools_logger,
)
from container_credentials.service.container_service import ContainerService
from container_credentials.service.credentials_provider import CredentialsProvider
from container_credentials.util.session_manager import sts_client

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient
else:
    STSClient = object

logger: Final = powertools_logger()


def build_credentials_provider(
    env: ProviderEnv,
    container_service: ContainerService,
    sts: Optional[STSClient] = None,
) -> CredentialsProvider:
    """
    Create the process wide credentials provider.

    The metadata server calls this once at startup and shares the returned provider
    between all request handlers.
    """
    # the logger is shared by the whole service, so reset it in both directions
    logger.setLevel(
        logging.DEBUG if env.enable_debug_logging else configured_log_level()
    )

    logger.info(f"ContainerCredentials, version {__version__}")
    if env.default_role_arn.is_empty():
        logger.warning(
            "No default IAM role configured, containers without a role will be refused credentials"
        )

    return CredentialsProvider(
        container_service=container_service,
        sts=sts or sts_client(env.user_agent_extra),
        default_role_arn=env.default_role_arn,
        default_policy=env.default_policy,
    )
