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

import logging
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import TypeVar
from typing import Union

from lerpable.easing import Easing


log = logging.getLogger(__name__)


# ========================================================================= #
# Type Hints                                                                #
# ========================================================================= #


T = TypeVar('T')
AliasesHint = Union[str, Tuple[str, ...]]


# ========================================================================= #
# Easing Registry                                                           #
# ========================================================================= #


class RegistryEasings(Mapping[str, Easing]):
    """
    Named easings, each easing can be stored under multiple aliases.
    - keys can only be added, never overwritten or removed
    - plain functions are wrapped as `Easing` instances when added
    """

    def __init__(self, name: str):
        if not str.isidentifier(name):
            raise ValueError(f'Registry names must be valid identifiers, got: {repr(name)}')
        self._name = name
        self._easings: Dict[str, Easing] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def examples(self) -> List[str]:
        return list(self._easings.keys())

    def __repr__(self):
        return f'{self.__class__.__name__}({self._name})'

    # --- MAPPING --- #

    def __getitem__(self, k: str) -> Easing:
        try:
            return self._easings[k]
        except KeyError:
            raise KeyError(f'Registry: {repr(self._name)} has no easing: {repr(k)}, must be one of: {sorted(self._easings)}') from None

    def __contains__(self, k) -> bool:
        return k in self._easings

    def __len__(self) -> int:
        return len(self._easings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._easings)

    def __setitem__(self, aliases: AliasesHint, easing: Union[Easing, Callable]) -> None:
        self._add(self._normalise_aliases(aliases), easing)

    def __delitem__(self, k: str) -> None:
        raise RuntimeError(f'Registry: {repr(self._name)} does not support item deletion. Tried to remove key: {repr(k)}')

    # --- REGISTER --- #

    def register(
        self,
        aliases: Optional[AliasesHint] = None,
        auto_alias: bool = True,
    ) -> Callable[[T], T]:
        """
        Register an easing function to this registry.
        - can be used as a decorator @register(...)
        - the function name is used as the first alias, unless `auto_alias=False`
        - the original function is returned unchanged
        """
        aliases = self._normalise_aliases(aliases if (aliases is not None) else (), check_nonempty=False)

        def _decorator(fn: T) -> T:
            keys = self._with_auto_alias(fn, aliases, auto_alias=auto_alias)
            easing = fn if isinstance(fn, Easing) else Easing(fn, name=keys[0])
            self._add(keys, easing)
            return fn
        return _decorator

    def setmissing(self, aliases: AliasesHint, easing: Union[Easing, Callable]) -> None:
        """Add the easing under each of the aliases that are not yet taken"""
        missing = tuple(k for k in self._normalise_aliases(aliases) if k not in self._easings)
        if missing:
            self._add(missing, easing)

    # --- HELPER --- #

    def _add(self, aliases: Tuple[str, ...], easing: Union[Easing, Callable]) -> None:
        # check everything before modifying anything
        for k in aliases:
            if not str.isidentifier(k):
                raise ValueError(f'Keys stored in registry: {repr(self._name)} must be valid identifiers, got: {repr(k)}')
            if k in self._easings:
                raise RuntimeError(f'Tried to overwrite existing key: {repr(k)} in registry: {repr(self._name)}')
        if not isinstance(easing, Easing):
            easing = Easing(easing)
        for k in aliases:
            self._easings[k] = easing
        log.debug(f'registered: {repr(easing)} to registry: {repr(self._name)} with aliases: {aliases}')

    def _normalise_aliases(self, aliases: AliasesHint, check_nonempty: bool = True) -> Tuple[str, ...]:
        if isinstance(aliases, str):
            aliases = (aliases,)
        if not isinstance(aliases, tuple):
            raise TypeError(f'Multiple aliases must be provided to registry: {repr(self._name)} as a Tuple[str], got: {repr(aliases)}')
        if check_nonempty and not aliases:
            raise ValueError(f'At least one alias must be provided to registry: {repr(self._name)}, got: {repr(aliases)}')
        return aliases

    def _with_auto_alias(self, fn, aliases: Tuple[str, ...], auto_alias: bool) -> Tuple[str, ...]:
        if not auto_alias:
            if not aliases:
                raise RuntimeError(f'Cannot add easing to registry: {repr(self._name)}, no manual aliases were specified and automatic aliasing is disabled!')
            return aliases
        name = fn.name if isinstance(fn, Easing) else getattr(fn, '__name__', None)
        if not (isinstance(name, str) and str.isidentifier(name)):
            if not aliases:
                raise RuntimeError(f'Cannot add easing to registry: {repr(self._name)}, no automatic alias was found!')
            return aliases
        if name in self._easings:
            if not aliases:
                raise RuntimeError(f'automatic alias: {repr(name)} already exists for registry: {repr(self._name)} and no alternative aliases were specified.')
            return aliases
        return (name, *aliases)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
