# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import TYPE_CHECKING, Final, Optional

from boto3 import Session
from botocore.config import Config as _Config

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient
else:
    STSClient = object


def get_boto_config(user_agent_extra: str) -> _Config:
    """Returns a boto3 config with standard retries and `user_agent_extra`"""
    return _Config(
        retries={"max_attempts": 10, "mode": "standard"},
        user_agent_extra=user_agent_extra,
    )


def sts_client(
    user_agent_extra: str, session: Optional[Session] = None
) -> STSClient:
    """
    Build an STS client bound to the regional endpoint of the current region.

    Regional endpoints issue session tokens that are valid in every region, unlike the
    global endpoint which only issues tokens valid in regions enabled by default. When
    no region is configured the client falls back to botocore's endpoint resolution.
    """
    session = session or Session()
    region: Final = session.region_name
    if not region:
        return session.client("sts", config=get_boto_config(user_agent_extra))

    if session.get_partition_for_region(region) == "aws-cn":
        sts_regional_endpoint = str.format("https://sts.{}.amazonaws.com.cn", region)
    else:
        sts_regional_endpoint = str.format("https://sts.{}.amazonaws.com", region)

    client: STSClient = session.client(
        "sts",
        region_name=region,
        endpoint_url=sts_regional_endpoint,
        config=get_boto_config(user_agent_extra),
    )
    return client
