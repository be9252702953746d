# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod

from container_credentials.model.container_info import ContainerInfo


class ContainerServiceError(Exception):
    pass


class ContainerNotFoundError(ContainerServiceError):
    pass


class ContainerService(ABC):
    """Resolves the network address of a caller to the container making the call"""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Short name of the container platform (e.g. "docker"), used in session names"""
        raise NotImplementedError()

    @abstractmethod
    def container_for_ip(self, container_ip: str) -> ContainerInfo:
        # raises ContainerNotFoundError when no container owns the address
        raise NotImplementedError()
