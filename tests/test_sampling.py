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

import pytest

from lerpable import lerp_range
from lerpable import lerp_step


# ========================================================================= #
# TESTS                                                                     #
# ========================================================================= #


def test_lerp_step():
    assert lerp_step(5, 10, 0.0, 100.0) == 50.0
    assert lerp_step(0, 10, 0.0, 100.0) == 0.0
    assert lerp_step(10, 10, 0.0, 100.0) == 100.0
    # not clipped
    assert lerp_step(20, 10, 0.0, 100.0) == 200.0
    # eased
    assert lerp_step(5, 10, 0.0, 100.0, easing='ease_in_quad') == 25.0
    # stepped values
    assert lerp_step(4, 10, False, True) is False
    assert lerp_step(5, 10, False, True) is True
    with pytest.raises(AssertionError):
        lerp_step(1, 0, 0.0, 1.0)


def test_lerp_range():
    assert lerp_range(0.0, 10.0, 5) == [0.0, 2.5, 5.0, 7.5, 10.0]
    assert lerp_range(0.0, 10.0, 4, endpoint=False) == [0.0, 2.5, 5.0, 7.5]
    assert lerp_range(0, 8, 3) == [0, 4, 8]
    assert lerp_range(0.0, 1.0, 0) == []
    assert lerp_range(0.0, 1.0, 1) == [0.0]
    # sequences switch as a whole
    assert lerp_range([1], [2, 3], 3) == [[1], [2, 3], [2, 3]]


def test_lerp_range_eased():
    assert lerp_range(0.0, 16.0, 5, easing='ease_in_quad') == [0.0, 1.0, 4.0, 9.0, 16.0]
    # custom callables only ever receive python floats
    seen = []
    def record(t):
        seen.append(type(t))
        return t
    lerp_range(0.0, 1.0, 3, easing=record)
    assert seen == [float, float, float]


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
