# wirekit

`wirekit` gives Python code a set of building blocks modelled on a
microcontroller sketch core: a mutable string type with sketch-style
semantics, a `print`/`println` output layer, number-to-text conversion,
random numbers and range mapping, and elapsed-time counters and delays.
It has no dependencies outside the standard library.

## Installation

```
pip install wirekit
```

For running the test suite:

```
pip install "wirekit[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `wirekit.numconv` | `ltoa`, `itoa`, `ultoa`, `utoa`, `dtostrf`, `dtostrnf`, `is_ascii`, `to_ascii`, `bv` |
| `wirekit.text_search` | `TextOps`, a mutable text buffer with `index_of`, `last_index_of`, `replace`, `remove`, `to_lower_case`, `to_upper_case`, `trim` |
| `wirekit.astring` | `ArduinoString`, a `TextOps` that may be invalid, with concatenation, comparison, character access, `substring` and numeric parsing |
| `wirekit.wmath` | `random_seed`, `random`, `map_value`, `make_word` |
| `wirekit.timing` | `millis`, `micros`, `delay`, `delay_microseconds`, `yield_now` |
| `wirekit.printer` | `Print`, `Printable`, `BufferPrint` and the base constants `DEC`, `HEX`, `OCT`, `BIN` |

## Examples

Formatting numbers:

```python
from wirekit.numconv import ltoa, dtostrf

ltoa(-255, 10)          # '-255'
ltoa(255, 16)           # 'ff'
dtostrf(3.14159, 6, 2)  # '  3.14'
```

`ltoa` and `ultoa` raise `ValueError` for a radix outside 2..36. Outside
base 10, negative values are shown in their 32-bit two's-complement form.

Working with strings:

```python
from wirekit.astring import ArduinoString

s = ArduinoString("Hello")
s += " world"
s.index_of("world")          # 6
s.to_upper_case()
str(s)                       # 'HELLO WORLD'
str(ArduinoString(255, 16))  # 'ff'
ArduinoString(" 42abc").to_int()  # 42
```

An `ArduinoString` built from `None` is invalid: it is falsy, has length
zero and compares as empty. Out-of-range character access returns `"\0"`
instead of raising.

Printing into a buffer:

```python
from wirekit.printer import BufferPrint

out = BufferPrint()
out.print(42)
out.print(" is ")
out.println(255, 16)
out.print(1.999, 2)
str(out)  # '42 is FF\r\n2.00'
```

Every `print` and `println` call returns the number of bytes written, and
`println` ends each line with `"\r\n"`. Subclass `Print` and implement
`write_byte` to send output anywhere else; subclass `Printable` and
implement `print_to` to make your own objects printable.

Math and timing:

```python
from wirekit.wmath import random_seed, random, make_word
from wirekit.timing import millis, delay

random_seed(1234)
random(10)              # a number in [0, 10)
random(5, 8)            # a number in [5, 8)
make_word(0x12, 0x34)   # 4660

start = millis()
delay(50)
millis() - start        # at least 50
```

`millis` and `micros` count from the moment `wirekit.timing` is imported and
wrap at 32 bits. `map_value` keeps the sketch-core arithmetic exactly: the
scaled distance is divided by the input span plus `out_min`, and `out_min`
is not added to the result.

## What this package does not do

`wirekit` works only in memory and on the host clock. It does not talk to
serial ports or other devices, does not read or parse input streams, has no
IP address type, and does not run setup/loop sketches in threads. There is
no command-line program.