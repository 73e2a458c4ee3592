# sujet

Three small modules in one package:

- `sujet.basics`: integer and string helpers.
- `sujet.students`: a `Student` record, a validating `new_student` function
  and a `StudentList` collection.
- `sujet.wordguess`: a word-guessing game in French, played in the terminal.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Playing

```
wordguess
```

By default the game picks a random five-letter word from
`liste_francais.txt` in the current directory and gives you six attempts.
Only lines made entirely of the letters `a` to `z` (after lowering case) are
used as candidate words. If the file cannot be read or holds no word of the
requested length, the command prints `Erreur: ...` and exits with status 1.

Options:

- `--dictionary FILE`: word list to pick the secret word from
  (default `liste_francais.txt`).
- `--length N`: length of the secret word (default 5).
- `--attempts N`: number of attempts (default 6).
- `--random`: use a word of random letters instead of the word list.
- `--ai`: let the computer play; it guesses words of random letters.

After each guess, every letter is shown:

- `[a]`: right letter in the right place
- `(a)`: letter in the word, but somewhere else
- ` a `: letter not in the word

A guess whose length differs from the secret word is refused and does not
count as an attempt. Guesses are not checked against the word list. A guess
that uses exactly the letters of the secret word in another order has every
letter shown as misplaced. When input ends before the game is over, the game
counts as lost.

## Using the library

```python
import sys

from sujet.basics import factorial, filter_even, reverse_string
from sujet.students import StudentList, new_student
from sujet.wordguess import evaluate_guess, LetterStatus

factorial(10)                  # 3628800
factorial(-5)                  # 0
filter_even([1, 2, 3, 4])      # [2, 4]
reverse_string("hello")        # "olleh"

roster = StudentList()
roster.add_students(new_student("Alice", 20, 17.5), new_student("Bob", 21, 12.0))
roster.remove_student("Bob")
roster.sort_by_grade().write(sys.stdout)   # Alice (20): 17.5

evaluate_guess("apple", "apply")
# [CORRECT_POSITION, CORRECT_POSITION, CORRECT_POSITION, CORRECT_POSITION, ABSENT]
```

### `sujet.basics`

`sum_of_three`, `is_even`, `max_of_four`, `factorial` (0 for a negative
argument), `count_occurrences`, `filter_even` and `reverse_string`.

### `sujet.students`

- `Student(name, age, grade)`: a plain dataclass; it does not validate.
- `new_student(name, age, grade)`: builds a `Student`, raising `ValueError`
  when the name is empty, the age is outside 1–99 or the grade is outside 0–20.
- `StudentList`: iterable and sized; `add_students(*students)`,
  `remove_student(name)` (removes every student with that name),
  `sort_by_grade()` (returns a new list, highest grade first, keeping the
  order of equal grades) and `write(out)` (one `Name (age): grade` line per
  student, grade with one decimal).

### `sujet.wordguess`

- `LetterStatus`: `CORRECT_POSITION`, `WRONG_POSITION`, `ABSENT`.
- `GameConfig(word_length=5, max_attempts=6, use_dictionary=True, human_player=True)`.
- `generate_random_word(length)`, `generate_word_from_dictionary(filename, length)`,
  `is_alpha(s)`, `is_anagram(s1, s2)`.
- `evaluate_guess(secret, guess)`: raises `ValueError` when the lengths differ.
- `display_result(guess, status, out=None)`, `run_human_game(config, secret, reader=None, out=None)`,
  `run_ai_game(config, secret, guesser=None, out=None)`: standard input and
  output are used when no stream is given.
- `main(argv=None)`: the `wordguess` command.

## Tests

```
pip install ".[test]"
pytest
```