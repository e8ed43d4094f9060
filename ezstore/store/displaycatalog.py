"""Product lookup in the display catalog."""

from __future__ import annotations

from typing import Any

import requests

from ezstore.locale_tag import Locale
from ezstore.store.app import Apps, parse_app
from ezstore.store.http import StoreClient

DISPLAYCATALOG_URL = "https://displaycatalog.mp.microsoft.com/v7.0/products"

_PLATFORMS = {"windows.desktop", "windows.universal"}
_MISSING = object()


class CatalogError(Exception):
    """The catalog could not provide usable product information."""


def _field(obj: Any, key: str, default: Any) -> Any:
    """Look a key up the way JSON field names are matched: exactly, then ignoring case."""
    if not isinstance(obj, dict):
        return default
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        lowered = key.lower()
        value = next((v for k, v in obj.items() if k.lower() == lowered), _MISSING)
    if value is _MISSING or value is None:
        return default
    return value


def _list(obj: Any, key: str) -> list:
    value = _field(obj, key, [])
    return value if isinstance(value, list) else []


def can_redeem(sku_availability: dict) -> bool:
    """Return True if any availability of the SKU offers the "redeem" action."""
    return any(
        str(action).lower() == "redeem"
        for availability in _list(sku_availability, "Availabilities")
        for action in _list(availability, "Actions")
    )


def get_app_info(product_id: str, locale: Locale, client: StoreClient) -> tuple[Apps, str]:
    """Fetch the installable packages of a product and its update category id."""
    url = (
        f"{DISPLAYCATALOG_URL}/{product_id}"
        f"?market={locale.country}&languages={locale},{locale.language},neutral"
    )
    try:
        response = client.request("GET", url)
    except requests.RequestException as error:
        raise CatalogError(f"can not get app info: GET {url}: {error}") from error

    if response.status_code == 404:
        raise CatalogError(f'product with id "{product_id}" and locale "{locale}" not found')
    if response.status_code >= 400:
        status = f"{response.status_code} {response.reason or ''}".strip()
        raise CatalogError(f"can not get app info: GET {url}: server returns error: {status}")

    try:
        info = response.json()
    except ValueError as error:
        raise CatalogError(f"can not get app info: GET {url}: {error}") from error

    product = _field(info, "Product", {})
    availabilities = _list(product, "DisplaySkuAvailabilities")
    if not availabilities:
        raise CatalogError("can not get app info: no availabilities for this app")

    packages = []
    for availability in availabilities:
        if not can_redeem(availability):
            continue
        properties = _field(_field(availability, "Sku", {}), "Properties", {})
        for package in _list(properties, "Packages"):
            for platform in _list(package, "PlatformDependencies"):
                if str(_field(platform, "PlatformName", "")).lower() in _PLATFORMS:
                    packages.append(package)

    if not packages:
        raise CatalogError("can not get app info: no available packages found")

    apps = Apps()
    wuid = ""
    for package in packages:
        try:
            app = parse_app(str(_field(package, "PackageFullName", "")))
        except ValueError as error:
            raise CatalogError(str(error)) from error
        for dependency in _list(package, "FrameworkDependencies"):
            app.add(str(_field(dependency, "PackageIdentity", "")))
        apps.add(app)
        if not wuid:
            wuid = str(_field(_field(package, "FulfillmentData", {}), "WuCategoryId", ""))

    return apps, wuid