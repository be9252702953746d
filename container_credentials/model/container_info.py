# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from typing import Optional

from container_credentials.util.arn import RoleArn


@dataclass(frozen=True)
class ContainerInfo:
    """
    Identity of a container as reported by the container platform.

    `iam_role` may be empty when the container did not declare a role. `iam_policy`
    is None when the container did not declare a policy; blank policies are
    normalized to None.
    """

    container_id: str
    iam_role: RoleArn = field(default_factory=RoleArn)
    iam_policy: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.iam_role, RoleArn):
            object.__setattr__(self, "iam_role", RoleArn(self.iam_role or ""))
        if self.iam_policy is not None and not self.iam_policy.strip():
            object.__setattr__(self, "iam_policy", None)

    @property
    def has_custom_role(self) -> bool:
        return not self.iam_role.is_empty()
