"""
Тесты для Precision — Generic Real Scalars & IEEE-754 Propagation

Проверяет:
1. Определение точности по входу
2. Приведение к заданной точности
3. Подавление FloatingPointError/RuntimeWarning внутри ieee_propagate
4. Epsilon-сравнения float
"""

import warnings

import numpy as np
import pytest

from fn_math.core.math.precision import (
    DEFAULT_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    as_real,
    ieee_propagate,
    is_close,
    is_same_real,
    precision_of,
)


class TestPrecisionOf:
    """Тесты precision_of"""

    def test_numpy_floating_keeps_type(self) -> None:
        """NumPy floating → собственный тип"""
        assert precision_of(np.float32(1.0)) is np.float32
        assert precision_of(np.float64(1.0)) is np.float64
        assert precision_of(np.float16(1.0)) is np.float16

    def test_python_numbers_default(self) -> None:
        """Python float/int → DEFAULT_PRECISION"""
        assert DEFAULT_PRECISION is np.float64
        assert precision_of(1.0) is np.float64
        assert precision_of(3) is np.float64

    def test_numpy_integer_default(self) -> None:
        """NumPy integer → DEFAULT_PRECISION"""
        assert precision_of(np.int32(3)) is np.float64


class TestAsReal:
    """Тесты as_real"""

    def test_default_precision(self) -> None:
        """Без precision: собственная точность или float64"""
        assert isinstance(as_real(2), np.float64)
        assert isinstance(as_real(np.float32(2.0)), np.float32)

    def test_explicit_precision(self) -> None:
        """Явная точность"""
        result = as_real(0.5, np.float32)
        assert isinstance(result, np.float32)
        assert result == 0.5

    def test_special_values(self) -> None:
        """NaN/Inf сохраняются"""
        assert np.isnan(as_real(float("nan")))
        assert as_real(float("inf"), np.float32) == np.inf


class TestIeeePropagate:
    """Тесты декоратора ieee_propagate"""

    def test_overflow_returns_inf_without_warning(self) -> None:
        """Переполнение → inf, без RuntimeWarning"""

        @ieee_propagate
        def exp(x):
            return np.exp(np.float64(x))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert exp(1000.0) == np.inf

    def test_overrides_strict_caller_errstate(self) -> None:
        """np.errstate(all='raise') у вызывающего не влияет"""

        @ieee_propagate
        def divide(a, b):
            return np.float64(a) / np.float64(b)

        with np.errstate(all="raise"):
            assert divide(1.0, 0.0) == np.inf
            assert np.isnan(divide(0.0, 0.0))

    def test_restores_caller_errstate(self) -> None:
        """После вызова состояние ошибок вызывающего восстановлено"""

        @ieee_propagate
        def identity(x):
            return x

        with np.errstate(all="raise"):
            identity(1.0)
            with pytest.raises(FloatingPointError):
                np.float64(1.0) / np.float64(0.0)

    def test_preserves_metadata(self) -> None:
        """functools.wraps сохраняет имя и docstring"""

        @ieee_propagate
        def documented(x):
            """doc"""
            return x

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "doc"

    def test_exceptions_propagate(self) -> None:
        """Исключения функции не подавляются"""

        @ieee_propagate
        def failing(x):
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            failing(1.0)


class TestIsClose:
    """Тесты is_close"""

    def test_defaults(self) -> None:
        """Толерантности по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        """Близкие значения"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        """Далёкие значения"""
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_numpy_scalars(self) -> None:
        """NumPy скаляры"""
        assert is_close(np.float32(0.5), 0.5)

    def test_special_values(self) -> None:
        """inf равен только себе, NaN не равен ничему"""
        assert is_close(float("inf"), float("inf"))
        assert not is_close(float("inf"), float("-inf"))
        assert not is_close(float("nan"), float("nan"))


class TestIsSameReal:
    """Тесты is_same_real"""

    def test_nan_equals_nan(self) -> None:
        """NaN совпадает с NaN"""
        assert is_same_real(float("nan"), np.float64("nan"))

    def test_exact_comparison(self) -> None:
        """Без толерантности"""
        assert is_same_real(1.5, 1.5)
        assert not is_same_real(0.0, 1e-300)
        assert not is_same_real(1.0, float("nan"))
