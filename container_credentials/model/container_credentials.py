# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from datetime import timedelta
from typing import Final

from container_credentials.model.container_info import ContainerInfo
from container_credentials.model.credentials import Credentials

# credentials this close to expiring are refreshed instead of handed out
EXPIRATION_SAFETY_MARGIN: Final = timedelta(minutes=5)


@dataclass(frozen=True)
class ContainerCredentials:
    container: ContainerInfo
    credentials: Credentials

    def is_valid(self, container: ContainerInfo) -> bool:
        """
        True if these credentials can still be handed to `container`.

        Credentials issued to a different container or for a different role are never
        reused, even when the container is reachable at the same address.
        """
        return (
            self.container.iam_role == container.iam_role
            and self.container.container_id == container.container_id
            and not self.credentials.expires_within(EXPIRATION_SAFETY_MARGIN)
        )
