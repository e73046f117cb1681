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
Field-wise interpolation for aggregate types.

Aggregate types explicitly declare which of their fields take part in
interpolation, and how. Nothing is discovered automatically:

    @lerpable(x=CONTINUOUS, y=CONTINUOUS, visible=Stepped(0.3))
    @dataclass
    class Sprite:
        x: float
        y: float
        visible: bool

    lerp(sprite_a, sprite_b, 0.25)

Declarations are checked once when the type is registered, any
mistakes raise a `LerpableDefinitionError` immediately.
"""

import dataclasses
import logging
import numbers
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union

from lerpable.easing import EasingHint
from lerpable.exceptions import LerpableDefinitionError
from lerpable.interp import DEFAULT_THRESHOLD
from lerpable.interp import lerp
from lerpable.interp import lerp_stepped


log = logging.getLogger(__name__)


# ========================================================================= #
# Field Policies                                                            #
# ========================================================================= #


T = TypeVar('T')


class FieldPolicy(object):

    def lerp(self, a, b, t: float):
        raise NotImplementedError


class Continuous(FieldPolicy):
    """
    Interpolate the field with its own `lerp` implementation,
    this recurses into fields that are themselves aggregates.
    """

    def lerp(self, a, b, t: float):
        return lerp(a, b, t)

    def __eq__(self, other):
        return isinstance(other, Continuous)

    def __hash__(self):
        return hash(Continuous)

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class Stepped(FieldPolicy):
    """
    Switch the field from `a` to `b` once `t >= threshold`
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        # bool is a number, but never a sensible threshold
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
            raise LerpableDefinitionError(f'stepped threshold must be a real number, got: {repr(threshold)}')
        if not (0 <= threshold <= 1):
            raise LerpableDefinitionError(f'stepped threshold must be in the range [0, 1], got: {repr(threshold)}')
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def lerp(self, a, b, t: float):
        return lerp_stepped(a, b, t, threshold=self._threshold)

    def __eq__(self, other):
        return isinstance(other, Stepped) and (other._threshold == self._threshold)

    def __hash__(self):
        return hash((Stepped, self._threshold))

    def __repr__(self):
        return f'{self.__class__.__name__}(threshold={self._threshold})'


CONTINUOUS = Continuous()


PolicyHint = Union[FieldPolicy, Type[Stepped], Type[Continuous], float, None]
FieldsHint = Union[Mapping[str, PolicyHint], Iterable[str]]


def _normalise_policy(name: str, policy: PolicyHint) -> FieldPolicy:
    if policy is None:
        return CONTINUOUS
    if isinstance(policy, FieldPolicy):
        return policy
    # allow the classes themselves, like a bare `@Stepped` annotation
    if policy is Stepped:
        return Stepped()
    if policy is Continuous:
        return CONTINUOUS
    if isinstance(policy, numbers.Real) and not isinstance(policy, bool):
        return Stepped(policy)
    raise LerpableDefinitionError(f'invalid policy for field: {repr(name)}, must be an instance of: {FieldPolicy.__name__}, got: {repr(policy)}')


# ========================================================================= #
# Lerp Fields                                                               #
# ========================================================================= #


class LerpFields(object):
    """
    The declared fields of an aggregate type and the policy used
    to interpolate each of them. Instances of this class are
    attached to registered types as `__lerp__` and `__lerp_fields__`
    """

    def __init__(self, fields: Mapping[str, FieldPolicy], constructor: Optional[Callable[..., Any]] = None):
        self._fields: Tuple[Tuple[str, FieldPolicy], ...] = tuple(fields.items())
        self._constructor = constructor

    @property
    def fields(self) -> Dict[str, FieldPolicy]:
        return dict(self._fields)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._fields)

    def __call__(self, a: T, b: T, t: float) -> T:
        # every field is resolved before the instance is built
        values = {name: policy.lerp(getattr(a, name), getattr(b, name), t) for name, policy in self._fields}
        constructor = self._constructor if (self._constructor is not None) else type(a)
        return constructor(**values)

    def __repr__(self):
        fields = ', '.join(f'{name}={repr(policy)}' for name, policy in self._fields)
        return f'{self.__class__.__name__}({fields})'


# ========================================================================= #
# Registration                                                              #
# ========================================================================= #


def _lerp_to(self: T, target: T, t: float, easing: Optional[EasingHint] = None) -> T:
    """Interpolate from this value towards the target"""
    return lerp(self, target, t, easing=easing)


def _normalise_fields(cls: type, fields: FieldsHint) -> Dict[str, FieldPolicy]:
    if isinstance(fields, str):
        raise LerpableDefinitionError(f'fields for: {cls.__name__} must be a mapping or a collection of names, got a single string: {repr(fields)}')
    if isinstance(fields, Mapping):
        items = list(fields.items())
    else:
        items = [(name, None) for name in fields]
    # check the names
    policies = {}
    for name, policy in items:
        if not (isinstance(name, str) and str.isidentifier(name)):
            raise LerpableDefinitionError(f'field names for: {cls.__name__} must be valid identifiers, got: {repr(name)}')
        if name in policies:
            raise LerpableDefinitionError(f'field: {repr(name)} for: {cls.__name__} was declared more than once')
        policies[name] = _normalise_policy(name, policy)
    return policies


def _check_dataclass_init(cls: type, policies: Mapping[str, FieldPolicy]):
    fields = dataclasses.fields(cls)
    not_init = sorted(f.name for f in fields if (f.name in policies) and not f.init)
    if not_init:
        raise LerpableDefinitionError(f'{cls.__name__} declares fields: {not_init} that are not arguments of its __init__, use a custom constructor instead')
    required = sorted(
        f.name for f in fields
        if f.init and (f.name not in policies)
        and (f.default is dataclasses.MISSING) and (f.default_factory is dataclasses.MISSING)
    )
    if required:
        raise LerpableDefinitionError(f'{cls.__name__} has required fields: {required} that are not declared, declare them or give them defaults')


def register_lerpable(cls: Type[T], fields: FieldsHint, constructor: Optional[Callable[..., T]] = None) -> Type[T]:
    """
    Declare how instances of an aggregate type are interpolated.

    :param cls: The aggregate type
    :param fields: Either a mapping of field names to policies, or a collection of
                   field names which are all interpolated continuously. Policies can be
                   `CONTINUOUS` (or `None`), `Stepped(threshold)`, the `Stepped` class
                   for the default threshold, or a plain number used as the threshold.
    :param constructor: Called with the interpolated fields as keyword arguments to build
                        the result, defaults to the type of the start value.
    """
    if not isinstance(cls, type):
        raise LerpableDefinitionError(f'only classes can be registered, got: {repr(cls)}')
    if '__lerp_fields__' in cls.__dict__:
        raise LerpableDefinitionError(f'{cls.__name__} has already been registered with fields: {cls.__dict__["__lerp_fields__"]}')
    if (constructor is not None) and not callable(constructor):
        raise LerpableDefinitionError(f'constructor for: {cls.__name__} must be callable, got: {repr(constructor)}')
    # check the fields
    policies = _normalise_fields(cls, fields)
    if not policies:
        raise LerpableDefinitionError(f'{cls.__name__} must declare at least one interpolated field')
    if dataclasses.is_dataclass(cls):
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(policies) - known)
        if unknown:
            raise LerpableDefinitionError(f'{cls.__name__} has no fields: {unknown}, must be some of: {sorted(known)}')
        # the dataclass itself builds the result, it must accept exactly the declared fields
        if constructor is None:
            _check_dataclass_init(cls, policies)
    # attach to the class
    lerp_fields = LerpFields(policies, constructor=constructor)
    cls.__lerp_fields__ = lerp_fields
    cls.__lerp__ = lerp_fields
    if 'lerp_to' not in cls.__dict__:
        cls.lerp_to = _lerp_to
    log.debug(f'registered lerpable: {cls.__module__}.{cls.__qualname__} with {lerp_fields}')
    return cls


def lerpable(fields: Optional[FieldsHint] = None, *, constructor: Optional[Callable[..., Any]] = None, **policies: PolicyHint) -> Callable[[Type[T]], Type[T]]:
    """
    Class decorator version of `register_lerpable`. Fields can be
    given as a single mapping or collection, or as keyword arguments.

    eg. `@lerpable(x=CONTINUOUS, enabled=Stepped(0.3))`
        `@lerpable(['x', 'y'])`
    """
    if (fields is not None) and policies:
        raise LerpableDefinitionError('fields must be given either positionally or as keyword arguments, not both')
    if fields is None:
        fields = policies

    def _decorator(cls: Type[T]) -> Type[T]:
        return register_lerpable(cls, fields, constructor=constructor)
    return _decorator


def get_lerp_fields(cls_or_value) -> Optional[LerpFields]:
    """Get the registered fields of an aggregate type or instance, or None if it is not registered"""
    cls = cls_or_value if isinstance(cls_or_value, type) else type(cls_or_value)
    return getattr(cls, '__lerp_fields__', None)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
