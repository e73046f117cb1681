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

"""
Easing functions reshape the interpolation factor `t` before
it is passed to the blending step. Every transform here is pure
and works on python scalars as well as numpy arrays.

    lerp(a, b, t, easing=E) == lerp(a, b, E(t))

Named versions of all of these are available from `lerpable.registry.EASINGS`
"""

import math
from typing import Callable
from typing import Optional
from typing import Union

import numpy as np


# ========================================================================= #
# Type Hints                                                                #
# ========================================================================= #


Ratio = Union[float, np.ndarray]
TransformFn = Callable[[Ratio], Ratio]


# ========================================================================= #
# Easing                                                                    #
# ========================================================================= #


class Easing(object):
    """
    A wrapper around a transform function that maps a linear
    ratio `t` (typically in the range [0, 1]) to an eased ratio.
    - the wrapped function must not capture any mutable state
    """

    __slots__ = ('_transform', '_name')

    def __init__(self, transform: TransformFn, name: Optional[str] = None):
        if not callable(transform):
            raise TypeError(f'easing transform must be callable, got: {repr(transform)}')
        if name is None:
            name = getattr(transform, '__name__', None)
        object.__setattr__(self, '_transform', transform)
        object.__setattr__(self, '_name', name)

    @property
    def transform(self) -> TransformFn:
        return self._transform

    @property
    def name(self) -> Optional[str]:
        return self._name

    def __call__(self, t: Ratio) -> Ratio:
        return self._transform(t)

    def then(self, other: Union['Easing', TransformFn]) -> 'Easing':
        """
        Compose two easings, `other` is applied to the output of this easing.
        """
        if not callable(other):
            raise TypeError(f'can only compose an easing with a callable, got: {repr(other)}')
        first, second = self._transform, other
        return Easing(lambda t: second(first(t)), name=f'{self._name}>{getattr(other, "name", getattr(other, "__name__", "?"))}')

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable, cannot set: {repr(key)}')

    def __reduce__(self):
        # rebuild through __init__, the default slot state restore uses setattr
        return (self.__class__, (self._transform, self._name))

    def __eq__(self, other):
        if isinstance(other, Easing):
            return self._transform is other._transform
        return NotImplemented

    def __hash__(self):
        return hash(self._transform)

    def __repr__(self):
        return f'{self.__class__.__name__}({self._name})'


# ========================================================================= #
# Helper                                                                    #
# ========================================================================= #


def _piecewise(t: Ratio, lower: TransformFn, upper: TransformFn, split: float = 0.5) -> Ratio:
    # scalars branch directly so that we don't return 0-d arrays
    if np.ndim(t) == 0:
        return lower(t) if (t < split) else upper(t)
    t = np.asarray(t)
    return np.where(t < split, lower(t), upper(t))


def _cos(t: Ratio) -> Ratio:
    return math.cos(t) if (np.ndim(t) == 0) else np.cos(t)


def _sin(t: Ratio) -> Ratio:
    return math.sin(t) if (np.ndim(t) == 0) else np.sin(t)


# ========================================================================= #
# Standard Easing Functions                                                 #
# ========================================================================= #


def linear(t: Ratio) -> Ratio:
    return t


# quadratic


def ease_in_quad(t: Ratio) -> Ratio:
    return t * t


def ease_out_quad(t: Ratio) -> Ratio:
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: Ratio) -> Ratio:
    return _piecewise(
        t,
        lower=lambda r: 2 * r * r,
        upper=lambda r: 1 - (-2 * r + 2) ** 2 / 2,
    )


# cubic


def ease_in_cubic(t: Ratio) -> Ratio:
    return t * t * t


def ease_out_cubic(t: Ratio) -> Ratio:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: Ratio) -> Ratio:
    return _piecewise(
        t,
        lower=lambda r: 4 * r * r * r,
        upper=lambda r: 1 - (-2 * r + 2) ** 3 / 2,
    )


# sine


def ease_in_sine(t: Ratio) -> Ratio:
    return 1 - _cos((t * math.pi) / 2)


def ease_out_sine(t: Ratio) -> Ratio:
    return _sin((t * math.pi) / 2)


def ease_in_out_sine(t: Ratio) -> Ratio:
    return -(_cos(math.pi * t) - 1) / 2


# ========================================================================= #
# Resolve                                                                   #
# ========================================================================= #


EasingHint = Union[Easing, str, TransformFn]


def resolve_easing(easing: EasingHint) -> Easing:
    """
    Obtain an `Easing` from an existing easing, the name of
    a registered easing, or any plain callable.
    """
    if isinstance(easing, Easing):
        return easing
    if isinstance(easing, str):
        # the registry imports this module
        from lerpable.registry import EASINGS
        return EASINGS[easing]
    if callable(easing):
        return Easing(easing)
    raise TypeError(f'easing must be an {Easing.__name__}, a registered name or a callable, got: {repr(easing)}')


# ========================================================================= #
# END                                                                     #
# ========================================================================= #
