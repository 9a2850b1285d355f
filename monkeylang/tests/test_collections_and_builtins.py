"""
Tests for strings, arrays, hashes and builtin functions in Monkey Language.
"""
import pytest

from monkeylang.objects import NULL, TRUE, Array, Error, Hash, Integer, String
from monkeylang.tests.utils import eval_source


def test_string_literal_and_concatenation():
    """
    Test string values and the + operator on strings.
    """
    result = eval_source('"Hello" + " " + "World!"')
    assert isinstance(result, String)
    assert result.value == "Hello World!"


def test_string_comparison():
    """
    Test that string equality compares contents.
    """
    assert eval_source('"a" == "a"') is TRUE
    assert eval_source('"a" != "b"') is TRUE
    assert eval_source('"a" == "b"').value is False


def test_array_literal():
    """
    Test that array elements are evaluated.
    """
    result = eval_source("[1, 2 * 2, 3 + 3]")
    assert isinstance(result, Array)
    assert [e.value for e in result.elements] == [1, 4, 6]
    assert result.inspect() == "[1,4,6]"


def test_array_literal_propagates_errors():
    """
    Test that an error in an element becomes the result.
    """
    assert eval_source("[1, nope, 3]") == Error("identifier not found: nope")


@pytest.mark.parametrize("source, expected", [
    ("[1, 2, 3][0]", 1),
    ("[1, 2, 3][1]", 2),
    ("[1, 2, 3][2]", 3),
    ("let i = 0; [1][i];", 1),
    ("[1, 2, 3][1 + 1];", 3),
    ("let myArray = [1, 2, 3]; myArray[2];", 3),
    ("let myArray = [1, 2, 3]; myArray[0] + myArray[1] + myArray[2];", 6),
    ("let myArray = [1, 2, 3]; let i = myArray[0]; myArray[i]", 2),
    ("[1, 2, 3][3]", None),
    ("[1, 2, 3][-1]", None),
])
def test_array_index_expressions(source, expected):
    """
    Test array indexing, with out-of-range indexes yielding null.
    """
    result = eval_source(source)
    if expected is None:
        assert result is NULL
    else:
        assert result.value == expected


def test_hash_literal():
    """
    Test that hash literals evaluate keys and values.
    """
    source = (
        'let two = "two";'
        "{"
        '  "one": 10 - 9,'
        "  two: 1 + 1,"
        '  "thr" + "ee": 6 / 2,'
        "  4: 4,"
        "  true: 5,"
        "  false: 6"
        "}"
    )
    result = eval_source(source)
    assert isinstance(result, Hash)
    expected = {
        String("one").hash_key(): 1,
        String("two").hash_key(): 2,
        String("three").hash_key(): 3,
        Integer(4).hash_key(): 4,
        TRUE.hash_key(): 5,
        eval_source("false").hash_key(): 6,
    }
    assert {k: pair.value.value for k, pair in result.pairs.items()} == expected


@pytest.mark.parametrize("source, expected", [
    ('{"foo": 5}["foo"]', 5),
    ('{"foo": 5}["bar"]', None),
    ('let key = "foo"; {"foo": 5}[key]', 5),
    ('{}["foo"]', None),
    ("{5: 5}[5]", 5),
    ("{true: 5}[true]", 5),
    ("{false: 5}[false]", 5),
])
def test_hash_index_expressions(source, expected):
    """
    Test hash lookups, with missing keys yielding null.
    """
    result = eval_source(source)
    if expected is None:
        assert result is NULL
    else:
        assert result.value == expected


@pytest.mark.parametrize("source, expected", [
    ('{"name": "Monkey"}[fn(x) { x }];', "unusable as hash key: FUNCTION"),
    ("{[1]: 2}", "unusable as hash key: ARRAY"),
    ("{if (false) { 1 }: 2}", "unusable as hash key: NULL"),
    ("1[0]", "index operator not supported: INTEGER"),
    ('"abc"[0]', "index operator not supported: STRING"),
])
def test_collection_errors(source, expected):
    """
    Test that non-hashable keys and bad index targets are errors.
    """
    assert eval_source(source) == Error(expected)


@pytest.mark.parametrize("source, expected", [
    ('len("")', 0),
    ('len("four")', 4),
    ('len("hello world")', 11),
    ("len([1, 2, 3])", 3),
    ("len([])", 0),
    ("first([1, 2, 3])", 1),
    ("last([1, 2, 3])", 3),
])
def test_builtin_values(source, expected):
    """
    Test builtins that return integers.
    """
    assert eval_source(source).value == expected


@pytest.mark.parametrize("source", ["first([])", "last([])", "rest([])"])
def test_builtins_on_empty_arrays(source):
    """
    Test that element builtins return null for empty arrays.
    """
    assert eval_source(source) is NULL


def test_rest_and_push_do_not_mutate():
    """
    Test that rest and push build new arrays.
    """
    source = (
        "let a = [1, 2, 3];"
        "let b = push(a, 4);"
        "let c = rest(a);"
        "[len(a), len(b), len(c), last(b), first(c)]"
    )
    assert eval_source(source).inspect() == "[3,4,2,4,2]"


@pytest.mark.parametrize("source, expected", [
    ("len(1)", "argument to `len` not supported, got INTEGER"),
    ('len("one", "two")', "wrong number of arguments. got=2, want=1"),
    ("first(1)", "argument to `first` must be ARRAY, got INTEGER"),
    ("last(true)", "argument to `last` must be ARRAY, got BOOLEAN"),
    ("rest(\"x\")", "argument to `rest` must be ARRAY, got STRING"),
    ("push(1, 1)", "argument to `push` must be ARRAY, got INTEGER"),
    ("push([1])", "wrong number of arguments. got=1, want=2"),
])
def test_builtin_errors(source, expected):
    """
    Test that builtin misuse yields error values.
    """
    assert eval_source(source) == Error(expected)


def test_puts_writes_inspected_values(capsys):
    """
    Test that puts prints each argument on its own line and returns null.
    """
    result = eval_source('puts("hello", 5, [1, 2], true)')
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ["hello", "5", "[1,2]", "true"]
    assert result is NULL


def test_user_bindings_shadow_builtins():
    """
    Test that a let binding takes precedence over a builtin of the same name.
    """
    assert eval_source("let len = fn(x) { 42 }; len([1]);").value == 42


def test_builtins_compose_with_closures():
    """
    Test a recursive map written with builtins.
    """
    source = (
        "let map = fn(arr, f) {"
        "  let iter = fn(arr, accumulated) {"
        "    if (len(arr) == 0) {"
        "      accumulated"
        "    } else {"
        "      iter(rest(arr), push(accumulated, f(first(arr))));"
        "    }"
        "  };"
        "  iter(arr, []);"
        "};"
        "let double = fn(x) { x * 2 };"
        "map([1, 2, 3, 4], double);"
    )
    assert eval_source(source).inspect() == "[2,4,6,8]"
