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

import lerpable.registry as R
from lerpable import Easing


# ========================================================================= #
# TESTS                                                                     #
# ========================================================================= #


COUNTS = {
    'EASINGS': 20,
}


@pytest.mark.parametrize('registry_key', COUNTS.keys())
def test_registry_loading(registry_key):
    registry = getattr(R, registry_key)
    # load everything and check the counts
    count = 0
    for example in registry:
        loaded = registry[example]
        assert isinstance(loaded, Easing)
        count += 1
    assert count == COUNTS[registry_key], f'invalid count for: {registry_key}'


def test_registry_aliases():
    assert R.EASINGS['linear'] is R.EASINGS['identity']
    assert R.EASINGS['ease_in_out_sine'] is R.EASINGS['easeInOutSine']
    assert R.EASINGS['ease_in_quad'].name == 'ease_in_quad'


def test_registry_register():
    registry = R.RegistryEasings('TEST_EASINGS')

    @registry.register(aliases=('smooth', 'smoothStep'))
    def smoothstep(t):
        return t * t * (3 - 2 * t)

    # the original function is returned unchanged
    assert smoothstep(0.5) == 0.5
    assert registry['smoothstep'] is registry['smooth']
    assert registry['smoothStep'](0.25) == 0.15625
    assert sorted(registry.examples) == ['smooth', 'smoothStep', 'smoothstep']

    # lambdas have no valid automatic alias
    with pytest.raises(RuntimeError, match='no automatic alias'):
        registry.register()(lambda t: t)
    registry.register(aliases='half')(lambda t: t / 2)
    assert registry['half'](0.5) == 0.25


def test_registry_errors():
    registry = R.RegistryEasings('TEST_EASINGS')
    registry['square'] = lambda t: t * t
    assert isinstance(registry['square'], Easing)
    # cannot overwrite or delete
    with pytest.raises(RuntimeError, match='overwrite'):
        registry['square'] = lambda t: t
    with pytest.raises(RuntimeError, match='does not support item deletion'):
        del registry['square']
    # invalid keys and values
    with pytest.raises(ValueError, match='valid identifiers'):
        registry['not valid'] = lambda t: t
    with pytest.raises(ValueError, match='At least one alias'):
        registry[()] = lambda t: t
    with pytest.raises(TypeError, match='must be callable'):
        registry['number'] = 1.0
    with pytest.raises(KeyError):
        registry['missing']
    with pytest.raises(ValueError):
        R.RegistryEasings('not valid')


def test_registry_setmissing():
    registry = R.RegistryEasings('TEST_EASINGS')
    first = Easing(lambda t: t)
    second = Easing(lambda t: t * t)
    registry.setmissing('value', first)
    registry.setmissing('value', second)  # must be able to call more than once!
    assert registry['value'] is first
    registry.setmissing(('value', 'other'), second)
    assert registry['other'] is second
    assert len(registry) == 2


def test_registry_stores_easings():
    registry = R.RegistryEasings('TEST_EASINGS')
    easing = Easing(lambda t: 1 - t, name='reverse')
    registry[('reverse', 'flip')] = easing
    assert registry['reverse'] is easing
    assert registry['flip'] is easing
    assert registry.get('missing') is None
    assert 'reverse' in registry
    assert dict(registry) == {'reverse': easing, 'flip': easing}
    # a failed registration leaves the registry untouched
    with pytest.raises(RuntimeError, match='overwrite'):
        registry[('fresh', 'reverse')] = lambda t: t
    assert 'fresh' not in registry


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
