# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import patch

import boto3
from moto import mock_aws
from pytest import fixture

from container_credentials.model.container_info import ContainerInfo
from container_credentials.service.credentials_provider import CredentialsProvider
from container_credentials.service.in_memory_container_service import (
    InMemoryContainerService,
)
from tests import (
    CONTAINER_ID,
    CONTAINER_IP,
    DEFAULT_POLICY,
    DEFAULT_REGION,
    DEFAULT_ROLE,
)
from tests.test_utils.fake_sts import FakeSts
from tests.test_utils.testsuite_env import MockSuiteEnv

TRUST_POLICY = '{"Version":"2012-10-17","Statement":[{"Effect":"Allow","Principal":{"AWS":"arn:aws:iam::123456789012:root"},"Action":"sts:AssumeRole"}]}'


@fixture(autouse=True)
def aws_credentials() -> Iterator[None]:
    creds = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": DEFAULT_REGION,
    }
    with patch.dict(environ, creds, clear=True):
        yield


@fixture(autouse=True)
def test_suite_env(aws_credentials: None) -> Iterator[MockSuiteEnv]:
    with MockSuiteEnv() as env:
        yield env


@fixture
def moto_backend() -> Iterator[None]:
    with mock_aws():
        yield


@fixture
def fake_sts() -> FakeSts:
    return FakeSts()


@fixture
def container_service() -> InMemoryContainerService:
    return InMemoryContainerService(
        type_name="docker",
        initial_data={CONTAINER_IP: ContainerInfo(container_id=CONTAINER_ID)},
    )


@fixture
def provider(
    container_service: InMemoryContainerService, fake_sts: FakeSts
) -> CredentialsProvider:
    return CredentialsProvider(
        container_service=container_service,
        sts=fake_sts,  # type: ignore[arg-type]
        default_role_arn=DEFAULT_ROLE,
        default_policy=DEFAULT_POLICY,
    )


@fixture
def sts_role_arn(moto_backend: None) -> str:
    iam = boto3.client("iam")
    role = iam.create_role(
        RoleName="container-role",
        AssumeRolePolicyDocument=TRUST_POLICY,
    )
    return role["Role"]["Arn"]
