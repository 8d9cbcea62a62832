"""
Library for building string parsers out of smaller parsers.

See the objects for more explanations.

See the `inkcomb.general` module for general purpose parsers you can use as examples.

Defining parsers:
```
# two characters, returned swapped
swap = Item().bind(lambda a: Item().map(lambda b: b + a))

# a digit `n`, then the next `n` characters
counted = general.digit.bind(lambda n: Take(int(n), Item()))
```

Using parsers:
```
result = swap.call("abc")
if result:
    value, rest = result    # `result` is a `Success` object
else:
    ...                     # `result` is a `Failure` object
```

Parsers never raise on a failed match. What leftover input means is up to the caller, `general.parse_all()` requires there to be none.
"""

import inkcomb.const as const
import inkcomb.main
from inkcomb.main import (
    Input,
    as_input,
    Success,
    Failure,
    ParseOutcome,
    ParseError,
    Parser,
    Zero,
    Return,
    Item,
    Map,
    Bind,
    Take,
)
import inkcomb.general as general
