"""
ActivationConfig — Конфигурация функции активации

Immutable Pydantic модель, описывающая одну функцию активации и её коэффициенты.
Полная совместимость с JSON Schema (contracts/schema/activation_config.json).
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Dict

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from fn_math.core.contracts import validate_activation_config
from fn_math.core.math.registry import (
    UnknownActivationError,
    build_activation,
    get_activation,
    resolve_name,
)


class ActivationConfig(BaseModel):
    """
    Конфигурация функции активации.

    name приводится к каноническому имени реестра (алиасы допустимы).
    params должен содержать ровно те коэффициенты, которые принимает функция,
    и хранится как read-only mapping: после валидации коэффициенты не меняются.

    Examples:
        >>> ActivationConfig(name="ELU", params={"a": 1.0}).name
        'exponential_linear_unit'
    """

    name: str = Field(..., min_length=1, description="Имя или алиас функции активации")
    params: Mapping[str, float] = Field(
        default_factory=dict,
        validate_default=True,
        description="Коэффициенты функции по имени",
    )

    model_config = {"frozen": True}

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.params.items())))

    @field_validator("params")
    @classmethod
    def freeze_params(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        """Копия коэффициентов в read-only mapping."""
        return MappingProxyType(dict(v))

    @field_serializer("params")
    def serialize_params(self, v: Mapping[str, float]) -> Dict[str, float]:
        return dict(v)

    @field_validator("name")
    @classmethod
    def canonicalize_name(cls, v: str) -> str:
        """Приведение имени к каноническому; неизвестное имя даёт ошибку валидации."""
        try:
            return resolve_name(v)
        except UnknownActivationError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_params(self) -> "ActivationConfig":
        """Набор коэффициентов совпадает с сигнатурой функции."""
        expected = get_activation(self.name).parameters

        missing = [p for p in expected if p not in self.params]
        if missing:
            raise ValueError(
                f"{self.name} requires parameters {list(expected)}, missing {missing}"
            )

        unknown = sorted(set(self.params) - set(expected))
        if unknown:
            raise ValueError(f"{self.name} does not accept parameters {unknown}")

        return self

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ActivationConfig":
        """
        Создание конфигурации из сырого dict (например, из JSON).

        Сначала проверяется JSON Schema контракт, затем модель.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
            pydantic.ValidationError: Если имя или коэффициенты невалидны
        """
        validate_activation_config(data)
        return cls.model_validate(data)

    def build(self) -> Callable:
        """Функция одного аргумента f(x) со связанными коэффициентами."""
        return build_activation(self.name, self.params)
