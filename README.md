# ezstore

ezstore is a library for working out which files make up a Microsoft Store
product. It queries the Store display catalog for a product, turns package and
bundle names into structured values, matches each application to its bundle,
picks the newest build of every framework dependency, and chooses the build
that suits a version and a processor architecture.

## Modules

- `ezstore.version` — `parse_version` and `Version`, a four-part Windows
  version (`major.minor.build.revision`) with `compare` (returns -1, 0 or 1)
  and `as_tuple`; also `FileInfo`, a record of a file's path, name and version.
- `ezstore.locale_tag` — `parse_locale` and `Locale`: an RFC 5646 style tag
  reduced to its language and optional country.
- `ezstore.arch` — `Architecture` (`AMD64`, `I386`, `ARM64`, `ARM`),
  `parse_architecture`, which accepts both Store names (`x64`, `x86`, `arm64`,
  `arm`) and host names (`amd64`, `386`), `Architecture.compatible_with`, and
  `current_architecture`, which raises `RuntimeError` on an unsupported machine.
- `ezstore.paths` — `join`, which joins and cleans path parts and writes them
  with backslashes.
- `ezstore.logger` — `Logger`, `LogLevel` and `parse_level`. The one-letter
  levels are `q` (quiet), `m` (minimal: success and error), `n` (normal: adds
  info and warning) and `d` (detailed: adds debug). Info, success and debug
  go to stdout, warnings and errors to stderr, each prefixed with a mark such
  as `[INF]`, coloured when the stream is a terminal and `NO_COLOR` is unset.
- `ezstore.store.packages` — `PackageFamilyName`, `Package`,
  `parse_package_family_name` and `parse_package`.
- `ezstore.store.app` — `App` (a package plus the names of its framework
  dependencies), `Apps` and `parse_app`.
- `ezstore.store.bundle` — `Bundle` (a package with a file format and a URL),
  `Bundles`, `parse_bundle` and `NoBundleError`. `Bundles.get_app_bundle`
  finds the bundle of an app; `Bundles.get_dependency` returns the
  highest-version bundle of a given name.
- `ezstore.store.file` — `File` (an app bundle with its dependency bundles),
  `Files` and `NoFileError`. `Files.get(None, arch)` returns the newest file;
  `Files.get(version, arch)` returns a file of that version whose
  architecture is compatible, preferring the order of
  `arch.compatible_with()`.
- `ezstore.store.slices` — `pretty_string`, which renders items as
  `[a, b, c]`, and `unordered_equal`.
- `ezstore.store.http` — `StoreClient`, whose `request` returns the response
  whatever its status and retries network errors (five times by default,
  pausing 5, 10, 15… seconds), logging each as a warning. At the detailed log
  level, failed exchanges are appended to the logger's `trace_file` using
  `trace_request`, `trace_error` and `trace_response`.
- `ezstore.store.displaycatalog` — `get_app_info(product_id, locale, client)`
  returns the redeemable desktop or universal packages of a product as `Apps`
  together with its update category id; `can_redeem` checks one SKU
  availability. Failures raise `CatalogError`.

## Examples

```python
from ezstore.version import parse_version

old = parse_version("1.2")
new = parse_version("v1.2.0.1")
assert str(old) == "v1.2.0.0"
assert old.compare(new) == -1
assert new.as_tuple() == (1, 2, 0, 1)
```

```python
from ezstore.locale_tag import parse_locale

assert str(parse_locale("bs-Cyrl-BA")) == "bs-BA"
assert str(parse_locale("en-029")) == "en"
```

```python
from ezstore.arch import parse_architecture

assert parse_architecture("amd64").compatible_with() == ["x64", "x86", "neutral"]
```

```python
from ezstore.store.bundle import Bundles, parse_bundle

bundles = Bundles()
bundles.add(parse_bundle("Foo_1.0.0.0_neutral_~_b1a2r3.appx", "https://example.com/a"))
bundles.add(parse_bundle("Foo_1.0.1.0_neutral_~_b1a2r3.appx", "https://example.com/b"))
assert bundles.get_dependency("Foo").url == "https://example.com/b"
```

```python
from ezstore.locale_tag import parse_locale
from ezstore.store.displaycatalog import get_app_info
from ezstore.store.http import StoreClient

with StoreClient() as client:
    apps, category_id = get_app_info("9NBLGGH4NNS1", parse_locale("en-US"), client)
    for app in apps:
        print(app.package, app.dependencies())
```

```python
from ezstore.paths import join

assert join("a/b", "c") == "a\\b\\c"
```

Malformed versions, locales, architectures, log levels, packages and bundles
raise `ValueError`.

## What it does not do

ezstore is a library only; it has no command-line program. It does not query
the Windows Update delivery service for the files of a product, so it cannot
find bundle download URLs on its own, and it neither downloads bundles nor
installs packages on the machine. `Bundle` and `Files` work with whatever
bundle names and URLs they are given.

## Tests

The test suite uses pytest and responses, listed in the `test` extra.