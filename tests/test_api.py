import json
import zipfile

import pytest

from localetext import api, catalog

CTX_HI = "examples/hi.SayHi"

TEXTS = [
    ("default", "main.init", "Gettext in init.", "Gettext in init."),
    ("default", "main.main", "Hello, world!", "Hello, world!"),
    ("default", "main.func", "Gettext in func.", "Gettext in func."),
    ("default", CTX_HI, "pkg hi: Hello, world!", "pkg hi: Hello, world!"),
    ("zh_CN", "main.init", "Gettext in init.", "Init函数中的Gettext.(ctx:main.init)"),
    ("zh_CN", "main.main", "Hello, world!", "你好, 世界!(ctx:main.main)"),
    ("zh_CN", "main.func", "Gettext in func.", "闭包函数中的Gettext.(ctx:main.func)"),
    ("zh_CN", CTX_HI, "pkg hi: Hello, world!", f'来自"Hi"包的问候: 你好, 世界!(ctx:{CTX_HI})'),
    ("zh_TW", "main.init", "Gettext in init.", "Init函數中的Gettext.(ctx:main.init)"),
    ("zh_TW", "main.main", "Hello, world!", "你好, 世界!(ctx:main.main)"),
    ("zh_TW", "main.func", "Gettext in func.", "閉包函數中的Gettext.(ctx:main.func)"),
    ("zh_TW", CTX_HI, "pkg hi: Hello, world!", f'來自"Hi"包的問候: 你好, 世界!(ctx:{CTX_HI})'),
]

POEMS = {
    "default": "Drinking Alone Under the Moon\nLi Bai\n\nflowers among one jar liquor\n",
    "zh_CN": "月下独酌\n李白\n\n花间一壶酒，独酌无相亲。\n",
    "zh_TW": "月下獨酌\n李白\n\n花間一壺酒，獨酌無相親。\n",
}


def _quote(text):
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _po(lang):
    blocks = ['msgid "Hello, world!"\nmsgstr "你好, 世界!"']
    for text_lang, ctx, src, dst in TEXTS:
        if text_lang == lang:
            blocks.append(f"msgctxt {_quote(ctx)}\nmsgid {_quote(src)}\nmsgstr {_quote(dst)}")
    return "\n\n".join(blocks) + "\n"


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))


@pytest.fixture
def locale_dir(tmp_path):
    root = tmp_path / "locale"
    for lang in ("zh_CN", "zh_TW"):
        _write(root / lang / "LC_MESSAGES" / "hello.po", _po(lang))
    for lang, poem in POEMS.items():
        _write(root / lang / "LC_RESOURCE" / "hello" / "poems.txt", poem)
    return root


@pytest.fixture
def locale_zip(tmp_path, locale_dir):
    path = tmp_path / "locale.zip"
    with zipfile.ZipFile(path, "w") as zf:
        for file in sorted(locale_dir.rglob("*")):
            if file.is_file():
                zf.write(file, "locale/" + file.relative_to(locale_dir).as_posix())
    return path


@pytest.fixture
def sources(locale_dir, locale_zip):
    return {
        "dir": lambda: api.new("hello", str(locale_dir)),
        "zip": lambda: api.new("hello", str(locale_zip), None),
        "zipdata": lambda: api.new("hello", "locale.zip", locale_zip.read_bytes()),
    }


def _check_texts(translated):
    for lang, ctx, src, dst in TEXTS:
        assert api.set_language(lang) == lang
        assert api.pgettext(ctx, src) == (dst if translated else src)


def _check_data(translated):
    for lang, poem in POEMS.items():
        assert api.set_language(lang) == lang
        data = api.getdata("poems.txt")
        if translated:
            assert data == poem.encode("utf-8")
        else:
            assert data is None


@pytest.mark.parametrize("kind", ["dir", "zip", "zipdata"])
def test_gettext(sources, kind):
    api.set_domain("hello")
    api.bind_locale(sources[kind]())
    _check_texts(True)
    api.bind_locale(api.new("hello", "", None))
    _check_texts(False)


@pytest.mark.parametrize("kind", ["dir", "zip", "zipdata"])
def test_getdata(sources, kind):
    api.set_domain("hello")
    api.bind_locale(sources[kind]())
    _check_data(True)
    api.bind_locale(api.new("hello", "", None))
    _check_data(False)


def test_example_directory(locale_dir):
    tr = api.new("hello", str(locale_dir)).set_language("zh_CN")
    assert tr.gettext("Hello, world!") == "你好, 世界!"


def test_example_zip(locale_zip):
    tr = api.new("hello", str(locale_zip)).set_language("zh_CN")
    assert tr.gettext("Hello, world!") == "你好, 世界!"


def test_example_zip_data(locale_zip):
    tr = api.new("hello", "???", locale_zip.read_bytes()).set_language("zh_CN")
    assert tr.gettext("Hello, world!") == "你好, 世界!"


def test_example_bind(locale_zip):
    api.bind_locale(api.new("hello", str(locale_zip)))
    api.set_language("zh_CN")
    assert api.gettext("Hello, world!") == "你好, 世界!"


def test_example_multi_lang(locale_dir):
    zh = api.new("hello", str(locale_dir)).set_language("zh_CN")
    tw = api.new("hello", str(locale_dir)).set_language("zh_TW")
    assert zh.pgettext(CTX_HI, "pkg hi: Hello, world!") == f'来自"Hi"包的问候: 你好, 世界!(ctx:{CTX_HI})'
    assert tw.pgettext(CTX_HI, "pkg hi: Hello, world!") == f'來自"Hi"包的問候: 你好, 世界!(ctx:{CTX_HI})'


JSON_DATA = json.dumps(
    {
        "zh_CN": {
            "LC_MESSAGES": {
                "hello.json": [
                    {"msgctxt": "", "msgid": "Hello, world!", "msgid_plural": "", "msgstr": ["你好, 世界!"]},
                    {"msgctxt": "main.main", "msgid": "Hello, world!", "msgstr": ["你好, 世界!(ctx:main.main)"]},
                    {"msgid": "%d person", "msgid_plural": "%d people", "msgstr": ["%d 人"]},
                ],
                "other.json": [{"msgid": "Hello, world!", "msgstr": ["你好!"]}],
            },
            "LC_RESOURCE": {"hello": {"poems.txt": POEMS["zh_CN"]}},
        },
        "default": {"LC_RESOURCE": {"hello": {"poems.txt": POEMS["default"]}}},
    },
    ensure_ascii=False,
)


def test_example_json():
    tr = api.new("hello", "???", JSON_DATA).set_language("zh_CN")
    assert tr.gettext("Hello, world!") == "你好, 世界!"


@pytest.fixture
def bound_json():
    api.bind_locale(api.new("hello", "???", JSON_DATA))
    api.set_language("zh_CN")


def test_plural_and_domain_functions(bound_json):
    assert api.ngettext("%d person", "%d people", 3) == "%d 人"
    assert api.pngettext("main.main", "Hello, world!", "Hellos", 2) == "你好, 世界!(ctx:main.main)"
    assert api.dgettext("hello", "Hello, world!") == "你好, 世界!"
    assert api.dpgettext("hello", "main.main", "Hello, world!") == "你好, 世界!(ctx:main.main)"
    assert api.dngettext("hello", "%d person", "%d people", 1) == "%d 人"
    assert api.dpngettext("hello", "main.main", "Hello, world!", "Hellos", 1) == "你好, 世界!(ctx:main.main)"
    assert api.dgettext("other", "Hello, world!") == "Hello, world!"


def test_getdata_functions(bound_json):
    assert api.getdata("poems.txt") == POEMS["zh_CN"].encode("utf-8")
    assert api.dgetdata("hello", "poems.txt") == POEMS["zh_CN"].encode("utf-8")
    assert api.dgetdata("nothere", "poems.txt") is None
    api.set_language("fr")
    assert api.getdata("poems.txt") == POEMS["default"].encode("utf-8")


def test_set_domain(bound_json):
    assert api.set_domain("other") == "other"
    assert api.gettext("Hello, world!") == "你好!"
    assert api.set_domain("") == "other"


def test_bind_locale_resets_language(locale_dir):
    loc = api.new("hello", str(locale_dir)).set_language("zh_CN")
    api.bind_locale(loc)
    assert loc.language == catalog.DEFAULT_LANGUAGE


def test_bind_none_gives_empty_catalog(locale_dir):
    api.bind_locale(api.new("hello", str(locale_dir)))
    api.bind_locale(None)
    assert api.set_language("zh_CN") == "zh_CN"
    assert api.gettext("Hello, world!") == "Hello, world!"
    assert api.set_domain("") == "default"