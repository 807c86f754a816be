# localetext

Translate strings and resource files with gettext-style message catalogs.

`localetext` reads GNU PO and MO catalogs and catalogs in a small JSON format.
It picks the plural form from the catalog's language and looks up translated
resource files such as text or images. Catalogs can live in a directory tree, in
a zip archive on disk, in zip or JSON data held in memory, or in a `.json` file.

## Installing

```
pip install localetext
```

The package uses nothing outside the standard library.

## Catalog layout

```
locale/                      # or locale.zip
  default/
    LC_MESSAGES/hello.po     # tried first
    LC_MESSAGES/hello.mo     # tried second
    LC_MESSAGES/hello.json   # tried third
    LC_RESOURCE/hello/poems.txt
  zh_CN/
    LC_MESSAGES/hello.po
    LC_RESOURCE/hello/poems.txt
```

When no language is given, the language comes from `LC_MESSAGES`, then from
`LANG`, and otherwise is `"default"`. A value such as `zh_CN.UTF-8` or
`el_GR@euro` is cut down to its language part (`zh_CN`, `el_GR`); see
`catalog.simplified_language` and `catalog.default_language`.

A resource that is missing for the current language is looked up in the
`default` language before giving up.

## Using the process-wide catalog

```python
from localetext import api

api.bind_locale(api.new("hello", "locale"))   # a directory, "locale.zip", or zip/JSON data
api.set_language("zh_CN")

print(api.gettext("Hello, world!"))
print(api.pgettext("main.main", "Hello, world!"))
print(api.ngettext("%d person", "%d people", 2))

poems = api.getdata("poems.txt")              # bytes, or None if there is no such resource
if poems is not None:
    print(poems.decode("utf-8"))
```

`bind_locale` switches the newly bound catalog to the process's default
language, so call `set_language` after binding. `set_language("")` goes back to
the default language; `set_domain("")` leaves the domain as it is. Both return
the value now in force.

The calls `dgettext`, `dpgettext`, `dngettext`, `dpngettext` and `dgetdata` look
in a named domain instead of the current one. Messages that have no
translation come back unchanged (or as the plural text, when the plural rule
picks a form other than the first).

## Independent catalogs

`api.new(domain, path, data)` returns a `catalog.Locale`. Each `Locale` keeps
its own language and domain (the `language` and `domain` properties), so several
can be used side by side:

```python
from localetext import api

zh = api.new("hello", "locale").set_language("zh_CN")
tw = api.new("hello", "locale").set_language("zh_TW")
print(zh.gettext("Hello, world!"), tw.gettext("Hello, world!"))
```

Zip or JSON data can be passed as the third argument, as bytes or str. The path
then serves only as a name:

```python
with open("locale.zip", "rb") as fh:
    catalog = api.new("hello", "locale.zip", fh.read()).set_language("zh_CN")
```

A `fs.FileSystem` object may also be passed as the third argument. The module
`localetext.fs` provides `OsFS`, `ZipFS`, `JsonFS` and `NilFS`, and `new_fs`,
`os_fs`, `zip_fs` and `nil_fs` to build them.

A JSON catalog maps each language to its `LC_MESSAGES` entries, and optionally
to its `LC_RESOURCE` entries (domain, then file name, then text):

```json
{"zh_CN": {
  "LC_MESSAGES": {"hello.json": [
    {"msgctxt": "", "msgid": "Hello, world!", "msgid_plural": "", "msgstr": ["你好, 世界!"]}
  ]},
  "LC_RESOURCE": {"hello": {"poems.txt": "..."}}
}}
```

## Reading and writing catalog files

```python
from localetext import po_file, mo_file

po = po_file.load_file("hello.po")
print(po.mime_header.language, len(po.messages))
po.save("copy.po")

mo = mo_file.load_file("hello.mo")
mo.save("copy.mo")
```

`po_file.load` and `mo_file.load` parse data held in memory. A malformed PO
line raises `ValueError`; malformed MO data raises `mo_file.MoFormatError`.
MO files of either byte order are read; they are always written little-endian,
without a hash table. When a PO file is written, its entries are sorted by
msgid and then by context, ignoring case and accents.

`translator.Translator` looks messages up in one loaded catalog; build it with
`translator.from_po`, `translator.from_mo` or `translator.from_json`.

## Plural rules

`localetext.plural.formula(lang)` returns the standard plural rule for a
language code as a function from a count to a plural index. The rule is chosen
from a fixed table by language prefix (`en_US` uses the `en` rule); languages
not in the table get a single plural form.

## What it does not do

- The `Plural-Forms` header of a catalog is read and kept, but not evaluated:
  plural forms always come from the built-in table, by the catalog's language.
- There is no command-line tool. In particular nothing extracts translatable
  strings from source code into a template; PO files can only be written from
  a `po_file.PoFile` built in Python.