# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from functools import cached_property


class RoleArn(str):
    """
    Reference to an IAM role, held as its ARN text.

    Two role ARNs are equal when their text is equal. An empty RoleArn means that no
    role was specified and the caller should fall back to a configured default.
    """

    @staticmethod
    def parse(value: str) -> "RoleArn":
        """Build a RoleArn from untrusted text, validating that it names an IAM role"""
        arn = RoleArn(value.strip())
        if arn.is_empty():
            return arn
        if arn.service != "iam" or arn.resource_type != "role" or not arn.role_name:
            raise ValueError(f"Not an IAM role ARN: {arn}")
        return arn

    def is_empty(self) -> bool:
        return len(self) == 0

    def canonical_string(self) -> str:
        return str(self)

    @cached_property
    def arn_parts(self) -> list[str]:
        parts = self.split(":")
        if len(parts) < 6 or parts[0] != "arn":
            raise ValueError(f"Invalid ARN format: {self}")
        # Rejoin resource part if it contains additional colons
        if len(parts) > 6:
            resource = ":".join(parts[5:])
            parts = parts[:5] + [resource]
        return parts

    @property
    def aws_partition(self) -> str:
        return self.arn_parts[1]

    @property
    def service(self) -> str:
        return self.arn_parts[2]

    @property
    def account(self) -> str:
        return self.arn_parts[4]

    @property
    def resource(self) -> str:
        return self.arn_parts[5]

    @property
    def resource_type(self) -> str:
        """Extract resource type from resource part (e.g., 'role' from 'role/path/name')"""
        if "/" in self.resource:
            return self.resource.split("/")[0]
        return ""

    @property
    def role_name(self) -> str:
        """Extract role name from resource part, dropping any path (e.g., 'name' from 'role/path/name')"""
        return self.resource.rsplit("/", 1)[-1] if "/" in self.resource else ""
