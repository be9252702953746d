# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from os import environ

from aws_lambda_powertools import Logger


def powertools_logger(service: str = "container-credentials") -> Logger:
    silence_boto_logs()
    logger = Logger(
        use_rfc3339=True,
        log_uncaught_exceptions=True,
        service=service,
    )
    return logger


def silence_boto_logs() -> None:
    logging.getLogger("boto3").setLevel(logging.WARN)
    logging.getLogger("botocore").setLevel(logging.WARN)
    logging.getLogger("urllib3").setLevel(logging.WARN)


def configured_log_level() -> str:
    """The level powertools picks up from the environment when debug logging is off"""
    level = environ.get("POWERTOOLS_LOG_LEVEL") or environ.get("LOG_LEVEL") or "INFO"
    return level.strip().upper()
