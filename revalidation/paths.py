"""
Revalidation path generation.

Maps a changed catalog entity to the frontend URL paths whose cached render
is now stale. Every generator is a pure function of (entity, locales).
"""

from typing import Any, Callable, Dict, Iterable, List, Optional


class UnknownEntityType(ValueError):
    """Raised when no path generator is registered for a content type."""


def entity_field(entity: Any, name: str) -> Any:
    """Read a field from a model instance, plain object or dict."""
    if entity is None:
        return None
    if isinstance(entity, dict):
        return entity.get(name)
    return getattr(entity, name, None)


def _slug(entity: Any) -> Optional[str]:
    slug = entity_field(entity, 'slug')
    if slug is None:
        return None
    slug = str(slug).strip()
    return slug or None


def _detail_paths(section: str, slug: str, locales: Iterable[str]) -> List[str]:
    return [f"/{locale}/{section}/{slug}" for locale in locales]


def _listing_paths(section: str, locales: Iterable[str]) -> List[str]:
    return [f"/{locale}/{section}" for locale in locales]


def get_product_paths(product: Any, locales: List[str]) -> List[str]:
    """
    Generate revalidation paths for a Product entity.

    Product detail pages for every locale followed by the product listing
    pages. Returns an empty list when the product has no slug.
    """
    slug = _slug(product)
    if not slug:
        return []
    return _detail_paths('product', slug, locales) + _listing_paths('product', locales)


def get_brand_paths(brand: Any, locales: List[str]) -> List[str]:
    """Brand detail pages only; brands have no listing page."""
    slug = _slug(brand)
    if not slug:
        return []
    return _detail_paths('brand', slug, locales)


def get_case_study_paths(case_study: Any, locales: List[str]) -> List[str]:
    """Finished works detail pages plus the finished works listing."""
    slug = _slug(case_study)
    if not slug:
        return []
    return (
        _detail_paths('finished-works', slug, locales) +
        _listing_paths('finished-works', locales)
    )


def get_accessory_paths(accessory: Any, locales: List[str]) -> List[str]:
    return _listing_paths('accessories', locales)


def get_gallery_paths(gallery: Any, locales: List[str]) -> List[str]:
    return _listing_paths('gallery', locales)


def get_glasses_paths(glasses: Any, locales: List[str]) -> List[str]:
    return _listing_paths('glasses', locales)


def get_global_paths(locales: List[str]) -> List[str]:
    """
    Generate revalidation paths for global data changes.

    Colors, hardware items, categories and types are components of other
    products, so the home page and the product listing are refreshed for
    every locale.
    """
    paths = []
    for locale in locales:
        paths.append(f"/{locale}")
        paths.append(f"/{locale}/product")
    return paths


def _global(entity: Any, locales: List[str]) -> List[str]:
    return get_global_paths(locales)


PathGenerator = Callable[[Any, List[str]], List[str]]

PATH_GENERATORS: Dict[str, PathGenerator] = {
    'product': get_product_paths,
    'brand': get_brand_paths,
    'case-study': get_case_study_paths,
    'accessory': get_accessory_paths,
    'gallery': get_gallery_paths,
    'glasses': get_glasses_paths,
    'color': _global,
    'hardware-item': _global,
    'product-category': _global,
    'product-type': _global,
}


def get_paths(entity_type: str, entity: Any, locales: List[str]) -> List[str]:
    """
    Generate the paths for a content type using the dispatch table.

    Args:
        entity_type: Content type identifier, e.g. 'product'
        entity: The changed entity (model instance, object or dict)
        locales: Locale codes to generate paths for

    Returns:
        List of paths, possibly empty

    Raises:
        UnknownEntityType: If no generator is registered for entity_type
    """
    try:
        generator = PATH_GENERATORS[entity_type]
    except KeyError:
        raise UnknownEntityType(f"No revalidation paths defined for '{entity_type}'")
    return generator(entity, locales)
