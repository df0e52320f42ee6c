"""Built-in example conversions used for quick self-checks."""

from wordcase.case_style import CaseStyle

# (input, style, expected output)
SAMPLE_CONVERSIONS: list[tuple[str, CaseStyle, str]] = [
    ("hello world", CaseStyle.CAMEL, "helloWorld"),
    ("  Foo-bar_baz.qux ", CaseStyle.CAMEL, "fooBarBazQux"),
    ("alreadyCamelCase", CaseStyle.CAMEL, "alreadyCamelCase"),
    ("first name", CaseStyle.CAMEL, "firstName"),
    ("user_id", CaseStyle.CAMEL, "userId"),
    ("SCREEN_NAME", CaseStyle.CAMEL, "screenName"),
    ("mobile-number", CaseStyle.CAMEL, "mobileNumber"),
    ("first name", CaseStyle.KEBAB, "first-name"),
    ("user_id", CaseStyle.KEBAB, "user-id"),
    ("SCREEN_NAME", CaseStyle.KEBAB, "screen-name"),
    ("mobile-number", CaseStyle.KEBAB, "mobile-number"),
    (
        "  multiple--spaces_and.delimiters  ",
        CaseStyle.KEBAB,
        "multiple-spaces-and-delimiters",
    ),
    ("camelCaseExample", CaseStyle.KEBAB, "camel-case-example"),
    ("Accented élève", CaseStyle.KEBAB, "accented-eleve"),
    ("", CaseStyle.KEBAB, ""),
    ("FirstName last-name", CaseStyle.DOT, "first.name.last.name"),
    ("user_id", CaseStyle.DOT, "user.id"),
    ("XMLHttpRequest", CaseStyle.DOT, "xml.http.request"),
]
