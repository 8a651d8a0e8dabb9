# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.aws.common import AWSCredentials
from flowblocks.core.entity import CoreData
from flowblocks.core.events import BlockInput, CollectingEventEmitter


class Secret(CoreData):
    _REDACTED_FIELDS = frozenset({"value"})

    def __init__(self, name, value):
        self.name = name
        self.value = value


class TestCoreData:
    def test_equality_and_hash(self):
        assert Secret("a", "x") == Secret("a", "x")
        assert Secret("a", "x") != Secret("a", "y")
        assert hash(Secret("a", {"k": [1, 2]})) == hash(Secret("a", {"k": [1, 2]}))

    def test_different_types_are_not_equal(self):
        class Other(CoreData):
            def __init__(self, name, value):
                self.name = name
                self.value = value

        assert Secret("a", "x") != Other("a", "x")

    def test_repr(self):
        assert repr(Secret("a", "x")) == "Secret(name='a',value='***')"
        assert str(Secret("a", None)) == "Secret(name='a',value=None)"

    def test_credentials_repr(self):
        assert repr(AWSCredentials("AKIA1", "secret")) == "AWSCredentials(access_key_id='AKIA1',secret_access_key='***',session_token=None)"


class TestEvents:
    def test_block_input_from_host(self):
        block_input = BlockInput.from_host({"region": "us-east-1"}, {"accessKeyId": "AKIA1", "secretAccessKey": "secret"})

        assert block_input.input_config == {"region": "us-east-1"}
        assert block_input.app_config.credentials() == AWSCredentials("AKIA1", "secret")
        assert "secret'" not in repr(block_input)

    def test_collecting_event_emitter(self):
        emitter = CollectingEventEmitter()
        assert emitter.last_payload is None

        emitter.emit({"a": 1})
        emitter.emit({"b": 2}, output_key="other")

        assert emitter.emissions == [("default", {"a": 1}), ("other", {"b": 2})]
        assert emitter.last_payload == {"b": 2}
