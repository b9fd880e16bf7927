"""Locale resolution logic for picking the best available locale.

Given a desired locale and an ordered pool of candidate locales, the resolver
walks a fixed specificity fallback:

1. exact language, region and variant match
2. language and region match
3. language match
4. the default locale, then the root locale, if present in the pool

Each tier scans the pool in its given order, so ties are broken by pool order.
"""

from typing import Callable, Iterable, List, Optional

import structlog
from infrastructure.i18n.models import ROOT_LOCALE, LocaleTag

logger = structlog.get_logger().bind(component="i18n.resolver")

# (tier name, predicate(candidate, desired)) in evaluation order
_MATCH_TIERS: List[tuple[str, Callable[[LocaleTag, LocaleTag], bool]]] = [
    ("exact", LocaleTag.matches_exactly),
    ("region", LocaleTag.matches_region),
    ("language", LocaleTag.matches_language),
]


class LocaleResolver:
    """Resolves the best matching locale out of a candidate pool.

    Stateless and safe to share between threads.
    """

    def resolve(
        self,
        desired: Optional[LocaleTag],
        pool: Optional[Iterable[LocaleTag]],
        default_locale: Optional[LocaleTag] = None,
    ) -> Optional[LocaleTag]:
        """Pick the pool entry that best matches the desired locale.

        Args:
            desired: Locale the caller would like.
            pool: Ordered candidate locales. Order decides ties.
            default_locale: Locale returned when no language matches and it
                is a pool member.

        Returns:
            The selected pool entry, or None when nothing applies.
        """
        if desired is None or pool is None:
            return None

        candidates = list(pool)
        if not candidates:
            return None

        log = logger.bind(desired=str(desired), pool_size=len(candidates))

        for tier, predicate in _MATCH_TIERS:
            for candidate in candidates:
                if predicate(candidate, desired):
                    log.debug("locale_resolved", tier=tier, resolved=str(candidate))
                    return candidate

        if default_locale is not None and default_locale in candidates:
            log.debug("locale_resolved", tier="default", resolved=str(default_locale))
            return candidates[candidates.index(default_locale)]

        if ROOT_LOCALE in candidates:
            log.debug("locale_resolved", tier="root", resolved="")
            return candidates[candidates.index(ROOT_LOCALE)]

        log.debug("locale_unresolved")
        return None


_default_resolver = LocaleResolver()


def resolve_locale(
    desired: Optional[LocaleTag],
    pool: Optional[Iterable[LocaleTag]],
    default_locale: Optional[LocaleTag] = None,
) -> Optional[LocaleTag]:
    """Module-level shortcut for LocaleResolver().resolve()."""
    return _default_resolver.resolve(desired, pool, default_locale)
