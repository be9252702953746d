# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Issues container scoped credentials by assuming an IAM role on behalf of the container.

Credentials are cached per container address and reused until the container behind
the address changes, its declared role changes, or the credentials get within the
expiration safety margin. Every lookup, including the STS call made on a cache miss,
runs under a single lock, so at most one AssumeRole call is in flight at any time.
"""
import threading
from typing import TYPE_CHECKING, Final, Optional

from botocore.exceptions import BotoCoreError, ClientError

from container_credentials.model.container_credentials import ContainerCredentials
from container_credentials.model.container_info import ContainerInfo
from container_credentials.model.credentials import Credentials
from container_credentials.observability.powertools_logging import powertools_logger
from container_credentials.service.container_service import ContainerService
from container_credentials.util.app_env_utils import env_to_optional_str
from container_credentials.util.arn import RoleArn
from container_credentials.util.session_name import generate_session_name
from container_credentials.util.time import utc_now

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient
    from mypy_boto3_sts.type_defs import AssumeRoleRequestTypeDef
else:
    STSClient = object
    AssumeRoleRequestTypeDef = dict

logger: Final = powertools_logger()

# max duration allowed for a role session that is not chained
SESSION_DURATION_SECONDS: Final = 3600


class NoRoleConfiguredError(Exception):
    pass


class CredentialsProvider:
    def __init__(
        self,
        *,
        container_service: ContainerService,
        sts: STSClient,
        default_role_arn: RoleArn = RoleArn(),
        default_policy: Optional[str] = None,
    ) -> None:
        self._container_service = container_service
        self._sts = sts
        self._default_role_arn = default_role_arn
        self._default_policy = env_to_optional_str(default_policy)
        self._container_credentials: dict[str, ContainerCredentials] = {}
        self._lock = threading.Lock()

    def credentials_for_ip(self, container_ip: str) -> Credentials:
        with self._lock:
            container = self._container_service.container_for_ip(container_ip)

            cached = self._container_credentials.get(container_ip)
            if cached is not None and cached.is_valid(container):
                logger.debug(
                    f"Reusing cached credentials for {container_ip}",
                    extra={"container_id": container.container_id},
                )
                return cached.credentials

            role_arn, iam_policy = self._effective_role_and_policy(container)
            session_name = generate_session_name(
                self._container_service.type_name, container.container_id
            )
            credentials = self.assume_role(role_arn, iam_policy, session_name)

            self._container_credentials[container_ip] = ContainerCredentials(
                container=container, credentials=credentials
            )
            logger.info(
                f"Issued credentials for {container_ip}",
                extra={
                    "container_id": container.container_id,
                    "role_arn": role_arn,
                    "session_name": session_name,
                    "expiration": credentials.expiration.isoformat(),
                },
            )
            return credentials

    def assume_role(
        self, role_arn: RoleArn, iam_policy: Optional[str], session_name: str
    ) -> Credentials:
        request: AssumeRoleRequestTypeDef = {
            "DurationSeconds": SESSION_DURATION_SECONDS,
            "RoleArn": role_arn.canonical_string(),
            "RoleSessionName": session_name,
        }
        # an empty policy is not a valid override, omit it entirely
        if iam_policy:
            request["Policy"] = iam_policy

        try:
            response = self._sts.assume_role(**request)
        except (ClientError, BotoCoreError) as ex:
            logger.error(
                f"Unable to assume role {role_arn}: {ex}",
                extra={"session_name": session_name},
            )
            raise

        return Credentials.from_sts_response(
            response["Credentials"], generated_at=utc_now()
        )

    def cached_addresses(self) -> list[str]:
        with self._lock:
            return sorted(self._container_credentials.keys())

    def _effective_role_and_policy(
        self, container: ContainerInfo
    ) -> tuple[RoleArn, Optional[str]]:
        if container.has_custom_role:
            return container.iam_role, container.iam_policy

        if self._default_role_arn.is_empty():
            raise NoRoleConfiguredError(
                f"container {container.container_id} has no role and no default role is configured"
            )
        return self._default_role_arn, container.iam_policy or self._default_policy
