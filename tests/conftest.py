import pytest

KEYWORDS = [
    "do", "if", "in", "or", "and", "end", "for", "not", "else", "then",
    "goto", "break", "local", "until", "while", "elseif", "repeat",
    "return", "function", "nil", "true", "false",
]

SAMPLE_LUA = r"""return {
  _null = nil,
  _false = false,
  _true = true,
  _zero = 0,
  _one = 1,
  _negative = -1,
  _float = 3.14,
  _big = 1e+123,
  _string = '...\'...\'...',
  _array0 = {},
  _array1 = {
    1,
  },
  _array2 = {
    1,
    2,
  },
  _object0 = {},
  _object1 = {
    _nested = {
      _value = 1,
    },
  },
  _object2 = {
    ['a b'] = 1,
    ['...\'...\'...'] = 2,
    [nil] = 3,
    [false] = 4,
    [true] = 5,
  },
  _keywords = {
    ['do'] = 'keyword',
    ['if'] = 'keyword',
    ['in'] = 'keyword',
    ['or'] = 'keyword',
    ['and'] = 'keyword',
    ['end'] = 'keyword',
    ['for'] = 'keyword',
    ['not'] = 'keyword',
    ['else'] = 'keyword',
    ['then'] = 'keyword',
    ['goto'] = 'keyword',
    ['break'] = 'keyword',
    ['local'] = 'keyword',
    ['until'] = 'keyword',
    ['while'] = 'keyword',
    ['elseif'] = 'keyword',
    ['repeat'] = 'keyword',
    ['return'] = 'keyword',
    ['function'] = 'keyword',
    ['nil'] = 'keyword',
    ['true'] = 'keyword',
    ['false'] = 'keyword',
  },
}"""

SAMPLE_LUA_COMPACT = (
    r"return{_null=nil,_false=false,_true=true,_zero=0,_one=1,_negative=-1,"
    r"_float=3.14,_big=1e+123,_string='...\'...\'...',_array0={},_array1={1,},"
    r"_array2={1,2,},_object0={},_object1={_nested={_value=1,},},"
    r"_object2={['a b']=1,['...\'...\'...']=2,[nil]=3,[false]=4,[true]=5,},"
    r"_keywords={"
    + "".join(f"['{word}']='keyword'," for word in KEYWORDS)
    + "},}"
)


def make_sample() -> dict:
    return {
        "_null": None,
        "_false": False,
        "_true": True,
        "_zero": 0,
        "_one": 1,
        "_negative": -1,
        "_float": 3.14,
        "_big": 1e123,
        "_string": "...'...'...",
        "_array0": [],
        "_array1": [1],
        "_array2": [1, 2],
        "_object0": [],
        "_object1": {"_nested": {"_value": 1}},
        "_object2": {
            "a b": 1,
            "...'...'...": 2,
            None: 3,
            False: 4,
            True: 5,
        },
        "_keywords": {word: "keyword" for word in KEYWORDS},
    }


def to_double_quotes(value):
    """Swap ' for " in every string and string key of *value*."""
    if isinstance(value, str):
        return value.replace("'", '"')
    if isinstance(value, list):
        return [to_double_quotes(v) for v in value]
    if isinstance(value, dict):
        return {to_double_quotes(k): to_double_quotes(v) for k, v in value.items()}
    return value


@pytest.fixture
def sample():
    return make_sample()


@pytest.fixture
def sample_lua():
    return SAMPLE_LUA


@pytest.fixture
def sample_lua_compact():
    return SAMPLE_LUA_COMPACT


@pytest.fixture
def sample_double():
    return to_double_quotes(make_sample())


@pytest.fixture
def sample_lua_double():
    return SAMPLE_LUA.replace("'", '"')


@pytest.fixture
def keywords():
    return list(KEYWORDS)
