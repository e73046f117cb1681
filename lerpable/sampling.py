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

from typing import List
from typing import Optional
from typing import TypeVar

import numpy as np

from lerpable.easing import EasingHint
from lerpable.easing import resolve_easing
from lerpable.interp import lerp


T = TypeVar('T')


# ========================================================================= #
# Step Based Interpolation                                                  #
# ========================================================================= #


def lerp_step(step: float, max_step: float, a: T, b: T, easing: Optional[EasingHint] = None) -> T:
    """Linear interpolation based on a step count, steps past `max_step` extrapolate."""
    assert max_step > 0, f'max_step must be positive, got: {repr(max_step)}'
    return lerp(a, b, step / max_step, easing=easing)


# ========================================================================= #
# Traversals                                                                #
# ========================================================================= #


def lerp_range(a: T, b: T, num: int, easing: Optional[EasingHint] = None, endpoint: bool = True) -> List[T]:
    """
    Interpolate `num` values between `a` and `b` at evenly spaced factors.
    - factors are eased once up front, each value is then computed independently
    """
    assert num >= 0, f'num must be non-negative, got: {repr(num)}'
    ratios = [float(t) for t in np.linspace(0.0, 1.0, num=num, endpoint=endpoint)]
    # user supplied easings are not required to support arrays
    if easing is not None:
        ease = resolve_easing(easing)
        ratios = [ease(t) for t in ratios]
    return [lerp(a, b, t) for t in ratios]


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
