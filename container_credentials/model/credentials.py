# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

from container_credentials.util.time import is_aware, to_iso8601_utc, utc_now

if TYPE_CHECKING:
    from mypy_boto3_sts.type_defs import CredentialsTypeDef
else:
    CredentialsTypeDef = object


class InvalidCredentials(ValueError):
    pass


@dataclass(frozen=True)
class Credentials:
    """
    A set of temporary credentials returned by an STS role assumption.

    Credentials are never modified after they are issued. When they get close to
    expiring they are replaced with a freshly issued set.
    """

    access_key: str
    secret_key: str = field(repr=False)
    token: str = field(repr=False)
    expiration: datetime
    generated_at: datetime

    def __post_init__(self) -> None:
        if not is_aware(self.expiration) or not is_aware(self.generated_at):
            raise InvalidCredentials(
                "credential timestamps must be timezone-aware datetimes"
            )
        if self.generated_at > self.expiration:
            raise InvalidCredentials(
                f"credentials generated at {self.generated_at.isoformat()} "
                f"already expired at {self.expiration.isoformat()}"
            )

    def expired_at(self, at: datetime) -> bool:
        if not is_aware(at):
            raise InvalidCredentials(
                "expiry can only be checked against a timezone-aware datetime"
            )
        return at > self.expiration

    def expired_now(self) -> bool:
        return self.expired_at(utc_now())

    def expires_within(self, duration: timedelta) -> bool:
        """True if these credentials will have expired `duration` from now"""
        return self.expired_at(utc_now() + duration)

    @classmethod
    def from_sts_response(
        cls, sts_credentials: CredentialsTypeDef, generated_at: Optional[datetime] = None
    ) -> "Credentials":
        return cls(
            access_key=sts_credentials["AccessKeyId"],
            secret_key=sts_credentials["SecretAccessKey"],
            token=sts_credentials["SessionToken"],
            expiration=sts_credentials["Expiration"],
            generated_at=generated_at or utc_now(),
        )

    def to_metadata_response(self) -> dict[str, str]:
        """Render as an instance metadata iam/security-credentials document"""
        return {
            "Code": "Success",
            "LastUpdated": to_iso8601_utc(self.generated_at),
            "Type": "AWS-HMAC",
            "AccessKeyId": self.access_key,
            "SecretAccessKey": self.secret_key,
            "Token": self.token,
            "Expiration": to_iso8601_utc(self.expiration),
        }
