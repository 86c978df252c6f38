# dollartemplate

Templates with `$`-style placeholders. Values can come from a mapping, from a
fallback mapper, or from both. When a variable has no value, substitution can
either raise an error or leave that placeholder as it was written.

Everything is in the module `dollartemplate.template`.

## Installation

```
pip install dollartemplate
```

## Template syntax

- `$name`: a named placeholder. It starts with a letter or `_` and continues
  with letters, digits or `_`. The first character may also be one of
  `[`, `\`, `]`, `^` or `` ` ``.
- `${name}`: a braced placeholder. The name starts with a letter or `_` and
  continues with letters, digits or `_`. Use this form when the name is
  followed directly by text, as in `${count}th`.
- `$$`: a literal `$`.

Any other `$` makes the template invalid. Examples are a `$` at the end of the
text, `$1`, and `${1}`. Constructing such a `Template` raises
`InvalidTemplateError`, a `ValueError`. Its `index` attribute holds the
position of the bad placeholder.

## Usage

```python
from dollartemplate.template import Template, SubstitutionFailedError

tmpl = Template("ERROR: expected ${expected}, got ${actual}")
print(tmpl.substitute({"expected": "nil", "actual": "ENOENT"}))
# ERROR: expected nil, got ENOENT
```

### Missing variables

`substitute` raises `SubstitutionFailedError` when a variable has no value.
This error is a `LookupError`, and its `variable` attribute holds the name that
failed.

```python
tmpl = Template("safe substitution: ${WILL_BE_REPLACED} and ${WONT_BE_REPLACED}")
try:
    tmpl.substitute({"WILL_BE_REPLACED": "replacement"})
except SubstitutionFailedError as exc:
    print(exc)  # failed to substitute variable WONT_BE_REPLACED
```

`safe_substitute`, or `substitute(..., safe=True)`, does not raise. It keeps
the placeholder exactly as it was written.

```python
print(tmpl.safe_substitute({"WILL_BE_REPLACED": "replacement"}))
# safe substitution: replacement and ${WONT_BE_REPLACED}
```

### Mappers

A mapper works out a value from the variable name. It can be either of these:

- A callable that takes the name and returns a string, or `None` when it has
  no value.
- An object with a `map(name)` method that follows the same rule, such as an
  implementation of the `Mapper` protocol.

You can pass a mapping and a mapper together. The mapping is checked first, and
the mapper is asked only about names the mapping does not contain.

```python
tmpl = Template("Good morning, ${user}! CPU is ${CPU}% and RAM is $RAM")
overrides = {"RAM": "100%"}

def lookup(name):
    return {"user": "default user", "CPU": "33"}.get(name)

print(tmpl.safe_substitute(overrides, mapper=lookup))
# Good morning, default user! CPU is 33% and RAM is 100%
```

### Round trip and comparison

`str(template)` gives back the template text, and that text parses into an
equal template. Templates compare equal when their parsed placeholders and
literal text are equal. They are also hashable.

```python
tmpl = Template("We have $named, ${braced}, $$escaped")
assert str(tmpl) == "We have $named, ${braced}, $$escaped"
assert Template(str(tmpl)) == tmpl
```