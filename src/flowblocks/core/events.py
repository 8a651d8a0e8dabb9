# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple

from flowblocks.core.aws.common import AppConfig
from flowblocks.core.entity import CoreData

DEFAULT_OUTPUT_KEY = "default"


class BlockInput(CoreData):
    """What the host passes to a block for each event: the block's (merged) input config and the app config."""

    def __init__(self, input_config: Mapping[str, Any], app_config: AppConfig) -> None:
        self.input_config = dict(input_config)
        self.app_config = app_config

    @classmethod
    def from_host(cls, input_config: Mapping[str, Any], app_config: Mapping[str, Any]) -> "BlockInput":
        return cls(input_config, AppConfig.from_dict(app_config))


class EventEmitter(ABC):
    """Host side sink for the events emitted by blocks."""

    @abstractmethod
    def emit(self, payload: Dict[str, Any], output_key: str = DEFAULT_OUTPUT_KEY) -> None:
        ...


class CollectingEventEmitter(EventEmitter):
    """Keeps emitted events in memory (in emission order), for local runs and tests."""

    def __init__(self) -> None:
        self._emissions: List[Tuple[str, Dict[str, Any]]] = []

    def emit(self, payload: Dict[str, Any], output_key: str = DEFAULT_OUTPUT_KEY) -> None:
        self._emissions.append((output_key, payload))

    @property
    def emissions(self) -> List[Tuple[str, Dict[str, Any]]]:
        return list(self._emissions)

    @property
    def last_payload(self) -> Optional[Dict[str, Any]]:
        return self._emissions[-1][1] if self._emissions else None
