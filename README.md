# practica

A collection of classic programming exercises (primes, leap years, binary
search, recursion, bit tricks, pattern printing, matrix puzzles) together
with a small contact book that runs in the terminal and keeps its entries
in a binary record file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The contact book

Start the interactive contact book:

```
practica-contacts
```

By default the book is loaded from and saved to `contact.txt` in the
current directory; `-f` / `--file` chooses another file:

```
practica-contacts --file my_contacts.bin
```

The menu offers `1` add, `2` delete, `3` search, `4` modify, `5` show and
`6` sort by name. Input is read as whitespace-separated words. Choosing `0`,
or reaching the end of input, saves the book to the file and exits; the
saved contacts are loaded again on the next start. An unknown choice prints
an error and shows the menu again.

The book can also be used from code:

```python
from practica.contacts import ContactBook, Person

book = ContactBook("contact.txt")   # loads the file if it exists
book.add(Person(name="alice", age=30, sex="female", tele="000", addr="somewhere"))
book.sort()
print(len(book), book.get("alice"))
book.save()
```

`index_of`, `get`, `remove` and `modify` look a person up by name and raise
`ContactNotFoundError` when no one has that name. `sort` orders the book by
the UTF-8 bytes of the names.

Each person is stored as one fixed-size record; `encode_person` and
`decode_person` convert between a `Person` and its bytes. Because the
fields have fixed widths, a `Person` refuses (with `ValueError`) a name
longer than 19 bytes, a sex longer than 9, a phone entry longer than 79,
an address longer than 29, any NUL character, or an age outside the
32-bit integer range.

## The exercises

The exercises are plain functions grouped by module:

- `practica.basics`: primes, leap years, factorials, Fibonacci numbers,
  linear and binary search, greatest common divisors, a `GuessingGame`
  class and text drawings such as `plane()` and `multiplication_table(n)`.
- `practica.drills`: string reversal, digit sums, bit counting, month
  lengths, triangle classification, word reversal, narcissistic numbers
  and star patterns.
- `practica.textbook`: odd/even partitioning, merging sorted lists,
  Newton's square root, saddle points, quadratic roots, bubble sort.
- `practica.challenges`: logic riddles, Pascal's triangle, string
  rotation, Young-tableau search, matrix transposition, sale prices.
- `practica.tricks`: trimmed averages, finding unpaired numbers, a careful
  string-to-integer parser (`parse_int`), bit swapping, `%20` space
  replacement.

```python
from practica.basics import primes_between, is_leap_year
from practica.challenges import is_rotation

print(primes_between(100, 200))
print(is_leap_year(2000))
print(is_rotation("AABCD", "BCDAA"))
```

The primes in a range, followed by their count, as a command (the range
defaults to 100 to 200):

```
practica-basics
practica-basics --start 2 --stop 100
```

## What is not included

Apart from the contact book and the prime listing, the exercises have no
commands of their own. The number guessing game, for example, is the
`GuessingGame` class, which answers one guess at a time; there is no
interactive game loop to run from the terminal.