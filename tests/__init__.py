# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from container_credentials.util.arn import RoleArn

DEFAULT_REGION = "us-east-1"

DEFAULT_ROLE = RoleArn("arn:aws:iam::123456789012:role/default-container-role")
DEFAULT_POLICY = '{"Version":"2012-10-17","Statement":[{"Effect":"Allow","Action":"s3:GetObject","Resource":"*"}]}'
CONTAINER_IP = "172.17.0.2"
CONTAINER_ID = "3f4e1a9c2b7d"
