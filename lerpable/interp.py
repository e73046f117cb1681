#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2026 The lerpable Authors
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~

import copy
import enum
import numbers
from collections.abc import Sequence
from fractions import Fraction
from typing import Optional
from typing import TypeVar

import numpy as np
import torch

from lerpable.easing import EasingHint
from lerpable.easing import resolve_easing


# ========================================================================= #
# Constants                                                                 #
# ========================================================================= #


T = TypeVar('T')

DEFAULT_THRESHOLD = 0.5


# ========================================================================= #
# Stepped                                                                   #
# ========================================================================= #


def _copy_value(value: T) -> T:
    # results must never alias the inputs
    if isinstance(value, torch.Tensor):
        return value.clone()
    if isinstance(value, np.ndarray):
        return value.copy()
    return copy.deepcopy(value)


def lerp_stepped(a: T, b: T, t: float, threshold: float = DEFAULT_THRESHOLD) -> T:
    """
    Switch from `a` to `b` once `t` reaches the threshold, no blending is performed.
    - the boundary is closed on the `b` side, `t == threshold` gives `b`
    """
    return _copy_value(a if (t < threshold) else b)


# ========================================================================= #
# Primitives                                                                #
# ========================================================================= #


def lerp_float(a, b, t: float):
    """Linear interpolation, NOT clipped when t is out of bounds [0, 1]"""
    return a + (b - a) * t


def lerp_int(a: int, b: int, t: float) -> int:
    """
    Linear interpolation computed exactly with fractions, the result
    is truncated toward zero and converted back to the type of `a`
    """
    value = int(a) + (int(b) - int(a)) * Fraction(float(t))
    return type(a)(int(value))


def lerp_array(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Component-wise linear interpolation of two numpy arrays with the same shape.
    - integer arrays are truncated toward zero and keep their dtype
    - boolean and non-numeric arrays switch at the default threshold
    """
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f'arrays must have the same shape, got: {a.shape} and {b.shape}')
    if np.issubdtype(a.dtype, np.bool_) or not np.issubdtype(a.dtype, np.number):
        return lerp_stepped(a, b, t)
    if np.issubdtype(a.dtype, np.integer):
        # float64 cannot hold every int64, keep the endpoints exact
        if t == 0: return a.copy()
        if t == 1: return b.astype(a.dtype)
        values = lerp_float(a.astype(np.float64), b.astype(np.float64), float(t))
        return np.trunc(values).astype(a.dtype)
    return np.asarray(lerp_float(a, b, t), dtype=a.dtype)


def lerp_tensor(a: torch.Tensor, b: torch.Tensor, t: float) -> torch.Tensor:
    """
    Component-wise linear interpolation of two torch tensors with the same shape.
    - integer tensors are truncated toward zero and keep their dtype
    - boolean tensors switch at the default threshold
    """
    if a.shape != b.shape:
        raise ValueError(f'tensors must have the same shape, got: {tuple(a.shape)} and {tuple(b.shape)}')
    if a.dtype == torch.bool:
        return lerp_stepped(a, b, t)
    if not (a.is_floating_point() or a.is_complex()):
        if t == 0: return a.clone()
        if t == 1: return b.clone().to(a.dtype)
        values = lerp_float(a.to(torch.float64), b.to(torch.float64), float(t))
        return torch.trunc(values).to(a.dtype)
    return lerp_float(a, b.to(a.dtype), float(t)).to(a.dtype)


def lerp_tuple(a: tuple, b: tuple, t: float) -> tuple:
    """
    Tuples are fixed-size vectors, each component is interpolated with `lerp`.
    - named tuples are rebuilt positionally
    """
    if len(a) != len(b):
        raise ValueError(f'tuples must have the same length, got: {len(a)} and {len(b)}')
    values = [lerp(x, y, t) for x, y in zip(a, b)]
    # named tuples take positional arguments, plain tuples take an iterable
    if hasattr(a, '_fields'):
        return type(a)(*values)
    return type(a)(values)


# ========================================================================= #
# Dispatch                                                                  #
# ========================================================================= #


def _lerp_dispatch(a: T, b: T, t: float) -> T:
    # types that implement the protocol themselves, including registered aggregates
    impl = getattr(type(a), '__lerp__', None)
    if impl is not None:
        if not isinstance(b, type(a)):
            raise TypeError(f'cannot interpolate between values of different types: {type(a).__name__} and {type(b).__name__}')
        return impl(a, b, t)
    # discrete values, bool is a subclass of int so this must come first
    if isinstance(a, (bool, np.bool_, enum.Enum)):
        return lerp_stepped(a, b, t)
    # numeric scalars
    if isinstance(a, numbers.Integral):
        return lerp_int(a, b, t)
    if isinstance(a, numbers.Real):
        return lerp_float(a, b, t)
    # vectors
    if isinstance(a, np.ndarray):
        return lerp_array(a, b, t)
    if isinstance(a, torch.Tensor):
        return lerp_tensor(a, b, t)
    if isinstance(a, tuple):
        return lerp_tuple(a, b, t)
    # ordered sequences switch as a whole, lengths may differ
    if isinstance(a, (str, bytes, Sequence)):
        return lerp_stepped(a, b, t)
    raise TypeError(f'values of type: {type(a).__name__} are not lerpable, got: {repr(a)}')


def lerp(
    a: T,
    b: T,
    t: float,
    threshold: Optional[float] = None,
    easing: Optional[EasingHint] = None,
) -> T:
    """
    Interpolate between `a` and `b` using the factor `t`.

    :param a: The start value, returned when `t == 0`
    :param b: The end value, returned when `t == 1`
    :param t: The interpolation factor, typically in the range [0, 1] but never clipped
    :param threshold: If given, switch from `a` to `b` when `t >= threshold` instead of blending
    :param easing: If given, transform `t` with this easing before interpolating.
                   Can be an `Easing`, the name of a registered easing or any callable.
    """
    if easing is not None:
        t = resolve_easing(easing)(t)
    if threshold is not None:
        return lerp_stepped(a, b, t, threshold=threshold)
    return _lerp_dispatch(a, b, t)


def is_lerpable(value) -> bool:
    """Check if `lerp` has an implementation for the type of the value"""
    if getattr(type(value), '__lerp__', None) is not None:
        return True
    return isinstance(value, (bool, np.bool_, enum.Enum, numbers.Real, np.ndarray, torch.Tensor, tuple, str, bytes, Sequence))


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
