"""
Constants — Epsilon, π и служебные значения numcore

Все угловые константы выводятся из единственного канонического PI,
независимых приближений нет. Epsilon один на всю библиотеку и не
переопределяется на уровне вызова.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPSILON > 0 и используется всеми сравнениями
2. HALF_PI, QUARTER_PI, TWO_PI, RAD_TO_DEG, DEG_TO_RAD согласованы с PI
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для сравнения float (абсолютная, двусторонняя)
EPSILON: Final[float] = 1e-5

# Машинный epsilon для binary64
MACHINE_EPSILON: Final[float] = sys.float_info.epsilon


# =============================================================================
# УГЛОВЫЕ КОНСТАНТЫ
# =============================================================================

PI: Final[float] = math.pi

HALF_PI: Final[float] = PI / 2.0
QUARTER_PI: Final[float] = PI / 4.0
TWO_PI: Final[float] = 2.0 * PI

# radians → degrees
RAD_TO_DEG: Final[float] = 180.0 / PI

# degrees → radians
DEG_TO_RAD: Final[float] = PI / 180.0


# =============================================================================
# SENTINEL-ЗНАЧЕНИЯ
# =============================================================================

INF: Final[float] = math.inf
NEG_INF: Final[float] = -math.inf
NAN: Final[float] = math.nan


# =============================================================================
# ЛИМИТЫ ИТЕРАЦИЙ
# =============================================================================

# Жёсткий лимит членов ряда Маклорена для sin
# Для аргумента, приведённого в (-2π, 2π), сходимость наступает за ~13 членов
SERIES_MAX_TERMS: Final[int] = 1000
