"""Algorithm lookup by JWT "alg" name.

A token-assembly layer reads the "alg" header and needs the matching
algorithm instance. ``get_algorithm`` resolves any registered name;
``AlgorithmRegistry`` does the same through an explicit allowlist, which is
what a verifier should use so that a token cannot pick its own algorithm.

Security notes
--------------
- Only allow the algorithms you actually issue (avoid algorithm confusion,
  e.g. an RS256 public key accepted as an HS256 secret).
- "none" is never resolvable through a registry unless explicitly enabled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

import structlog

from .algorithms import HS256, HS384, HS512, NONE, RS256, RS384, RS512
from .errors import UnknownAlgorithm
from .protocols import Alg

logger = structlog.get_logger()

ALGORITHMS: Final[Mapping[str, Alg]] = MappingProxyType(
    {alg.name: alg for alg in (NONE, HS256, HS384, HS512, RS256, RS384, RS512)}
)
"""Every built-in algorithm keyed by its "alg" name, in registration order."""

_DEFAULT_ALGORITHMS: Final[tuple[str, ...]] = tuple(
    name for name in ALGORITHMS if name != NONE.name
)
"""Default allowlist: everything except unsecured tokens."""


def get_algorithm(name: str) -> Alg:
    """Return the built-in algorithm registered under ``name``.

    Lookup is case-sensitive, as "alg" values are.

    Raises:
        UnknownAlgorithm: No algorithm is registered under ``name``.
    """
    try:
        return ALGORITHMS[name]
    except (KeyError, TypeError) as e:
        raise UnknownAlgorithm(f"unknown algorithm: {name!r}") from e


@dataclass(frozen=True, slots=True)
class RegistryOptions:
    """Configuration for which algorithms a registry hands out.

    Attributes:
        algorithms: Allowlist of "alg" names. Every entry must be a registered
            algorithm. Default: all built-ins except "none".

        allow_none: Permit the unsecured "none" algorithm. It must also be in
            ``algorithms``. Default: False.

    Example:
        ```python
        options = RegistryOptions(algorithms=("RS256",))
        registry = AlgorithmRegistry(options)

        alg = registry.get(header["alg"])  # UnknownAlgorithm unless RS256
        alg.verify(signing_input, signature, public_key)
        ```
    """

    algorithms: tuple[str, ...] = _DEFAULT_ALGORITHMS
    allow_none: bool = False

    def __post_init__(self) -> None:
        for name in self.algorithms:
            if name not in ALGORITHMS:
                raise UnknownAlgorithm(f"unknown algorithm: {name!r}")


class AlgorithmRegistry:
    """Allowlist-restricted view over the built-in algorithms.

    Thread Safety:
        The resolved set is computed once at construction and never mutated.
    """

    def __init__(self, options: RegistryOptions | None = None) -> None:
        self._opt = options or RegistryOptions()
        self._algs: Mapping[str, Alg] = MappingProxyType(
            {
                name: ALGORITHMS[name]
                for name in self._opt.algorithms
                if name != NONE.name or self._opt.allow_none
            }
        )

    @property
    def names(self) -> tuple[str, ...]:
        """The "alg" names this registry resolves, in allowlist order."""
        return tuple(self._algs)

    def get(self, name: str) -> Alg:
        """Return the allowed algorithm registered under ``name``.

        Raises:
            UnknownAlgorithm: ``name`` is unknown or not allowed.
        """
        alg = self._algs.get(name) if isinstance(name, str) else None
        if alg is None:
            logger.warning("jwt_algorithm_rejected", alg=name)
            raise UnknownAlgorithm(f"algorithm not allowed: {name!r}")
        return alg

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._algs
