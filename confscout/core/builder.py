# confscout/core/builder.py
"""Builds the search configuration handed to the explorer."""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from ..models.contribution import Contribution
from ..models.request import LoaderFn, SearchConfig, SearchRequest


def default_search_places(module_name: str) -> List[str]:
    """
    Default config file locations for `module_name`.

    The names and their order follow the conventions shared by JavaScript
    tooling, so downstream projects find the same file either way.
    """
    return [
        'package.json',
        f'.{module_name}rc',
        f'.{module_name}rc.json',
        f'.{module_name}rc.yaml',
        f'.{module_name}rc.yml',
        f'.{module_name}rc.js',
        f'.{module_name}rc.mjs',
        f'.{module_name}rc.cjs',
        f'.{module_name}.json',
        f'.{module_name}.yaml',
        f'.{module_name}.yml',
        f'{module_name}.config.js',
        f'{module_name}.config.mjs',
        f'{module_name}.config.cjs',
        f'{module_name}.config.json',
        f'{module_name}.config.yaml',
        f'{module_name}.config.yml',
    ]


def normalize_contributions(raw: Any) -> List[Contribution]:
    """
    Turn whatever the providers answered into a flat list of contributions.

    A single value counts as a one-element list. Lists are flattened exactly
    one level and None entries are dropped. Entries that are neither a
    Contribution nor a mapping carry nothing usable and are ignored.
    """
    if raw is None:
        return []

    if not isinstance(raw, (list, tuple)):
        raw = [raw]

    flattened = []
    for entry in raw:
        if isinstance(entry, (list, tuple)):
            flattened.extend(entry)
        else:
            flattened.append(entry)

    return [
        Contribution.coerce(entry)
        for entry in flattened
        if isinstance(entry, (Contribution, Mapping))
    ]


def build_search_config(
    request: SearchRequest,
    externals: Iterable[Contribution],
    module_loader: LoaderFn,
) -> SearchConfig:
    """
    Merge the caller's request with external contributions.

    Args:
        request: Validated search request
        externals: Contributions in the order they were received
        module_loader: Loader bound to '.js' and '.mjs' unless a contribution
            overrides them

    Returns:
        SearchConfig for the explorer

    Note:
        `merge_external=False` only suppresses contributed search places.
        Contributed loaders are applied regardless. Fields that are not a
        list (places) or a mapping (loaders) are ignored.
    """
    if request.search_places:
        search_places = list(request.search_places)
    else:
        search_places = default_search_places(request.module_name)

    loaders: Dict[str, LoaderFn] = {
        '.js': module_loader,
        '.mjs': module_loader,
    }

    for contribution in externals:
        places = contribution.search_places
        if request.merge_external and isinstance(places, (list, tuple)):
            search_places.extend(str(place) for place in places)

        if isinstance(contribution.loaders, Mapping):
            loaders.update(contribution.loaders)

    return SearchConfig(
        search_places=search_places,
        loaders=loaders,
        stop_dir=request.stop_dir,
    )
