"""Standard plural formulas for common languages."""

from __future__ import annotations

from typing import Callable, NamedTuple

PluralFormula = Callable[[int], int]


class PluralForm(NamedTuple):
    """A language prefix with its plural rule."""

    lang: str
    language: str
    value: str


# Standard hard-coded plural rules, tried in order by language prefix.
FORMS_TABLE: tuple[PluralForm, ...] = (
    PluralForm("??", "Unknown", "nplurals=1; plural=0;"),
    PluralForm("ja", "Japanese", "nplurals=1; plural=0;"),
    PluralForm("vi", "Vietnamese", "nplurals=1; plural=0;"),
    PluralForm("ko", "Korean", "nplurals=1; plural=0;"),
    PluralForm("en", "English", "nplurals=2; plural=(n != 1);"),
    PluralForm("de", "German", "nplurals=2; plural=(n != 1);"),
    PluralForm("nl", "Dutch", "nplurals=2; plural=(n != 1);"),
    PluralForm("sv", "Swedish", "nplurals=2; plural=(n != 1);"),
    PluralForm("da", "Danish", "nplurals=2; plural=(n != 1);"),
    PluralForm("no", "Norwegian", "nplurals=2; plural=(n != 1);"),
    PluralForm("nb", "Norwegian Bokmal", "nplurals=2; plural=(n != 1);"),
    PluralForm("nn", "Norwegian Nynorsk", "nplurals=2; plural=(n != 1);"),
    PluralForm("fo", "Faroese", "nplurals=2; plural=(n != 1);"),
    PluralForm("es", "Spanish", "nplurals=2; plural=(n != 1);"),
    PluralForm("pt", "Portuguese", "nplurals=2; plural=(n != 1);"),
    PluralForm("it", "Italian", "nplurals=2; plural=(n != 1);"),
    PluralForm("bg", "Bulgarian", "nplurals=2; plural=(n != 1);"),
    PluralForm("el", "Greek", "nplurals=2; plural=(n != 1);"),
    PluralForm("fi", "Finnish", "nplurals=2; plural=(n != 1);"),
    PluralForm("et", "Estonian", "nplurals=2; plural=(n != 1);"),
    PluralForm("he", "Hebrew", "nplurals=2; plural=(n != 1);"),
    PluralForm("eo", "Esperanto", "nplurals=2; plural=(n != 1);"),
    PluralForm("hu", "Hungarian", "nplurals=2; plural=(n != 1);"),
    PluralForm("tr", "Turkish", "nplurals=2; plural=(n != 1);"),
    PluralForm("pt_BR", "Brazilian", "nplurals=2; plural=(n > 1);"),
    PluralForm("fr", "French", "nplurals=2; plural=(n > 1);"),
    PluralForm("lv", "Latvian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n != 0 ? 1 : 2);"),
    PluralForm("ga", "Irish", "nplurals=3; plural=n==1 ? 0 : n==2 ? 1 : 2;"),
    PluralForm("ro", "Romanian", "nplurals=3; plural=n==1 ? 0 : (n==0 || (n%100 > 0 && n%100 < 20)) ? 1 : 2;"),
    PluralForm("lt", "Lithuanian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("ru", "Russian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("uk", "Ukrainian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("be", "Belarusian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("sr", "Serbian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("hr", "Croatian", "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("cs", "Czech", "nplurals=3; plural=(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2;"),
    PluralForm("sk", "Slovak", "nplurals=3; plural=(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2;"),
    PluralForm("pl", "Polish", "nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"),
    PluralForm("sl", "Slovenian", "nplurals=4; plural=(n%100==1 ? 0 : n%100==2 ? 1 : n%100==3 || n%100==4 ? 2 : 3);"),
)


def _mod(n: int, m: int) -> int:
    """Remainder truncated toward zero, so its sign follows the dividend."""
    r = abs(n) % m
    return r if n >= 0 else -r


def _normalize(forms: str) -> str:
    return forms.strip().replace(" ", "")


def _n_minus_one(n: int) -> int:
    return n - 1 if n > 0 else 0


def _latvian(n: int) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    return 1 if n != 0 else 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < _mod(n, 100) < 20:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if _mod(n, 10) >= 2 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _slavic(n: int) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _slovenian(n: int) -> int:
    rem = _mod(n, 100)
    if rem == 1:
        return 0
    if rem == 2:
        return 1
    if rem in (3, 4):
        return 2
    return 3


_FORMULAS: dict[str, PluralFormula] = {
    _normalize(forms): fn
    for forms, fn in (
        ("nplurals=n; plural=n-1;", _n_minus_one),
        ("nplurals=1; plural=0;", lambda n: 0),
        ("nplurals=2; plural=(n != 1);", lambda n: int(n != 1)),
        ("nplurals=2; plural=(n > 1);", lambda n: int(n > 1)),
        ("nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n != 0 ? 1 : 2);", _latvian),
        ("nplurals=3; plural=n==1 ? 0 : n==2 ? 1 : 2;", _irish),
        ("nplurals=3; plural=n==1 ? 0 : (n==0 || (n%100 > 0 && n%100 < 20)) ? 1 : 2;", _romanian),
        ("nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2);", _lithuanian),
        ("nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);", _slavic),
        ("nplurals=3; plural=(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2;", _czech),
        ("nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);", _polish),
        ("nplurals=4; plural=(n%100==1 ? 0 : n%100==2 ? 1 : n%100==3 || n%100==4 ? 2 : 3);", _slovenian),
    )
}


def _find(lang: str) -> PluralForm | None:
    return next((entry for entry in FORMS_TABLE if lang.startswith(entry.lang)), None)


def formula(lang: str) -> PluralFormula:
    """Return the standard plural formula for ``lang``.

    The first table entry whose language is a prefix of ``lang`` wins;
    unknown languages use the single-form rule.
    """
    entry = _find(lang) or _find("??")
    if entry is not None:
        return _FORMULAS[_normalize(entry.value)]
    return lambda n: n