"""
Core numeric primitives.

Модули этого пакета не зависят от внешних систем: только арифметика float,
модуль math платформы и Pydantic-модель контекста вычислений.
"""
