[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "localetext"
version = "0.1.0"
description = "Message catalogs in the gettext style: PO and MO files, plural rules and locale resources from directories, zip archives or JSON."
requires-python = ">=3.10"
dependencies = []
keywords = ["gettext", "i18n", "l10n", "po", "mo", "translation", "locale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Localization",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["localetext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
