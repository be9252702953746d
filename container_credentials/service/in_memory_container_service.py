# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Mapping, Optional

from container_credentials.model.container_info import ContainerInfo
from container_credentials.service.container_service import (
    ContainerNotFoundError,
    ContainerService,
)


class InMemoryContainerService(ContainerService):
    _containers: dict[str, ContainerInfo]

    def __init__(
        self,
        type_name: str = "memory",
        initial_data: Optional[Mapping[str, ContainerInfo]] = None,
    ):
        self._type_name = type_name
        self._containers = dict(initial_data) if initial_data else {}

    @property
    def type_name(self) -> str:
        return self._type_name

    def put(self, container_ip: str, container: ContainerInfo) -> None:
        self._containers[container_ip] = container

    def remove(self, container_ip: str) -> None:
        self._containers.pop(container_ip, None)

    def container_for_ip(self, container_ip: str) -> ContainerInfo:
        container = self._containers.get(container_ip)
        if container is None:
            raise ContainerNotFoundError(f"no container found for ip {container_ip}")
        return container
