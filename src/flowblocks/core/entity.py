# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict


class CoreData:
    """Provide basic dunder implementations for core entities (credentials, configs, block inputs) so that they can be
    compared, hashed and logged uniformly across the package.
    """

    # fields to be masked in repr (secrets)
    _REDACTED_FIELDS = frozenset()

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted((key, _hashable(value)) for key, value in self.__dict__.items())))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({','.join([f'{name}={self._repr_value(name, value)}' for name, value in self.__dict__.items()])})"

    def __str__(self) -> str:
        return self.__repr__()

    def _repr_value(self, name: str, value: Any) -> str:
        if name in self._REDACTED_FIELDS and value:
            return "'***'"
        return repr(value)


def _hashable(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((k, _hashable(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_hashable(v) for v in value)
    return value
