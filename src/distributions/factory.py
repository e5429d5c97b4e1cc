"""
Factory — построение распределения по декларативной спецификации

Двухступенчатая валидация:
1. JSON Schema контракт distribution_spec (семейство, имена параметров)
   → jsonschema.ValidationError
2. Pydantic модель семейства (диапазоны, NaN)
   → pydantic.ValidationError
"""

import logging
from typing import Any, Dict, Final, Union

from src.core.contracts import validate_distribution_spec
from src.distributions.chi_squared import ChiSquared
from src.distributions.fisher_snedecor import FisherSnedecor
from src.distributions.gamma import Gamma

logger = logging.getLogger(__name__)

Distribution = Union[Gamma, ChiSquared, FisherSnedecor]

FAMILIES: Final[Dict[str, type]] = {
    "gamma": Gamma,
    "chi_squared": ChiSquared,
    "fisher_snedecor": FisherSnedecor,
}


def build_distribution(spec: Dict[str, Any]) -> Distribution:
    """
    Построение распределения по спецификации.

    Args:
        spec: Спецификация, например
            {"family": "fisher_snedecor", "params": {"freedom_1": 3.0, "freedom_2": 3.0}}

    Returns:
        Экземпляр распределения

    Raises:
        jsonschema.ValidationError: Если спецификация нарушает контракт
        pydantic.ValidationError: Если параметры вне допустимого диапазона
    """
    validate_distribution_spec(spec)
    family = spec["family"]
    logger.debug("Building %s distribution with params %r", family, spec["params"])
    return FAMILIES[family](**spec["params"])


def distribution_spec(distribution: Distribution) -> Dict[str, Any]:
    """
    Обратное преобразование: спецификация для существующего распределения.

    Raises:
        KeyError: Если тип распределения не зарегистрирован в FAMILIES
    """
    for family, cls in FAMILIES.items():
        if type(distribution) is cls:
            return {"family": family, "params": distribution.model_dump()}
    raise KeyError(f"Unregistered distribution type: {type(distribution).__name__}")
