"""
Configuration — настройки калькулятора

Настройки читаются из переменных окружения с префиксом MPCALC_ или из .env
файла в текущей директории (переменные окружения имеют приоритет):

    MPCALC_KARATSUBA_THRESHOLD=50
    MPCALC_MAX_NESTING_DEPTH=200
    MPCALC_LOG_LEVEL=WARNING

Значения по умолчанию совпадают с константами модулей math и parser,
поэтому библиотека работает одинаково с настройками и без них.
"""

from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.math.digits import KARATSUBA_THRESHOLD_DEFAULT

# Максимальная вложенность скобок в выражении.
# Каждый уровень стоит три фрейма рекурсивного спуска
# (expression → term → factor), 200 уровней укладываются в стек CPython.
MAX_NESTING_DEPTH_DEFAULT: Final[int] = 200

# Верхняя граница настройки: 250 уровней × 3 фрейма < sys.getrecursionlimit() по умолчанию
MAX_NESTING_DEPTH_LIMIT: Final[int] = 250

LOG_LEVEL_DEFAULT: Final[str] = "WARNING"

LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class CalculatorSettings(BaseSettings):
    """
    Настройки вычислений и логирования.

    Immutable модель (frozen=True).
    """

    karatsuba_threshold: int = Field(
        KARATSUBA_THRESHOLD_DEFAULT,
        ge=1,
        description="Порог длины операнда (цифр) для перехода на Karatsuba",
    )
    max_nesting_depth: int = Field(
        MAX_NESTING_DEPTH_DEFAULT,
        ge=1,
        le=MAX_NESTING_DEPTH_LIMIT,
        description="Максимальная глубина вложенности скобок",
    )
    log_level: str = Field(LOG_LEVEL_DEFAULT, description="Уровень логирования")

    model_config = SettingsConfigDict(
        env_prefix="MPCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Уровень логирования должен быть одним из стандартных."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}, got {v!r}")
        return level


def get_settings() -> CalculatorSettings:
    """
    Получение настроек.

    Каждый вызов заново читает окружение, поэтому тесты могут менять
    переменные через monkeypatch.
    """
    return CalculatorSettings()
