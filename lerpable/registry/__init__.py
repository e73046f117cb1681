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
The lerpable registry contains named versions of the standard
easing functions so that they can be selected by configuration.

You can register your own easing functions using the provided decorator:
eg. `EASINGS.register(...options...)(your_function)`
"""

from lerpable.registry._registry import RegistryEasings

import lerpable.easing as _E


# ========================================================================= #
# EASINGS - should be synchronized with: `lerpable/easing.py`               #
# ========================================================================= #


EASINGS: RegistryEasings = RegistryEasings('EASINGS')
# [linear]
EASINGS.register(aliases='identity')(_E.linear)
# [quadratic]
EASINGS.register(aliases='easeInQuad')(_E.ease_in_quad)
EASINGS.register(aliases='easeOutQuad')(_E.ease_out_quad)
EASINGS.register(aliases='easeInOutQuad')(_E.ease_in_out_quad)
# [cubic]
EASINGS.register(aliases='easeInCubic')(_E.ease_in_cubic)
EASINGS.register(aliases='easeOutCubic')(_E.ease_out_cubic)
EASINGS.register(aliases='easeInOutCubic')(_E.ease_in_out_cubic)
# [sine]
EASINGS.register(aliases='easeInSine')(_E.ease_in_sine)
EASINGS.register(aliases='easeOutSine')(_E.ease_out_sine)
EASINGS.register(aliases='easeInOutSine')(_E.ease_in_out_sine)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
