"""WordGuess: guess a secret word letter by letter."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

DEFAULT_DICTIONARY = "liste_francais.txt"


class LetterStatus(IntEnum):
    """How a guessed letter relates to the secret word."""

    CORRECT_POSITION = 0
    WRONG_POSITION = 1
    ABSENT = 2


@dataclass
class GameConfig:
    """Settings for one game."""

    word_length: int = 5
    max_attempts: int = 6
    use_dictionary: bool = True
    human_player: bool = True


def generate_random_word(length: int) -> str:
    """Return a word of ``length`` random lowercase letters."""
    return "".join(random.choice(string.ascii_lowercase) for _ in range(length))


def generate_word_from_dictionary(filename: str, length: int) -> str:
    """Pick a random word of ``length`` lowercase letters from a word list file.

    Raises OSError if the file cannot be read and ValueError if it holds no
    suitable word.
    """
    with open(filename, encoding="utf-8") as file:
        words = [
            word
            for line in file
            if len(word := line.rstrip("\r\n").lower()) == length and is_alpha(word)
        ]
    if not words:
        raise ValueError("aucun mot de cette longueur dans le dictionnaire")
    return random.choice(words)


def is_alpha(s: str) -> bool:
    """Return True when ``s`` contains only the letters a to z."""
    return all("a" <= c <= "z" for c in s)


def is_anagram(s1: str, s2: str) -> bool:
    """Return True when both words hold exactly the same letters."""
    return len(s1) == len(s2) and Counter(s1) == Counter(s2)


def evaluate_guess(secret: str, guess: str) -> list[LetterStatus]:
    """Compare ``guess`` with ``secret`` and give a status for each letter."""
    if len(guess) != len(secret):
        raise ValueError("guess and secret must have the same length")

    # A rearrangement of the secret counts as entirely misplaced.
    if secret != guess and is_anagram(secret, guess):
        return [LetterStatus.WRONG_POSITION] * len(secret)

    status = [LetterStatus.ABSENT] * len(secret)
    remaining = Counter(secret)

    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            status[i] = LetterStatus.CORRECT_POSITION
            remaining[g] -= 1

    for i, g in enumerate(guess):
        if status[i] is LetterStatus.CORRECT_POSITION:
            continue
        if remaining[g] > 0:
            status[i] = LetterStatus.WRONG_POSITION
            remaining[g] -= 1

    return status


_MARKERS = {
    LetterStatus.CORRECT_POSITION: "[{}]",
    LetterStatus.WRONG_POSITION: "({})",
    LetterStatus.ABSENT: " {} ",
}


def display_result(
    guess: str, status: Sequence[LetterStatus], out: TextIO | None = None
) -> None:
    """Write the guess with each letter marked by its status."""
    out = out if out is not None else sys.stdout
    out.write("".join(_MARKERS[st].format(c) for c, st in zip(guess, status)) + "\n")


def run_human_game(
    config: GameConfig,
    secret: str,
    reader: TextIO | None = None,
    out: TextIO | None = None,
) -> None:
    """Play a game with guesses read line by line from ``reader``."""
    reader = reader if reader is not None else sys.stdin
    out = out if out is not None else sys.stdout

    out.write("Bienvenue dans WordGuess !\n")
    out.write(
        f"Le mot à deviner a {config.word_length} lettres. "
        f"Tu as {config.max_attempts} essais.\n"
    )
    attempt = 1
    while attempt <= config.max_attempts:
        out.write(f"Essai {attempt}/{config.max_attempts} : ")
        out.flush()
        line = reader.readline()
        if not line:
            out.write("\n")
            break
        guess = line.lower().strip()

        if len(guess) != config.word_length:
            out.write(f"Mot invalide. Il faut un mot de {config.word_length} lettres.\n")
            continue

        display_result(guess, evaluate_guess(secret, guess), out)
        if guess == secret:
            out.write("Bravo, tu as trouvé le mot !\n")
            return
        attempt += 1

    out.write(f"Tu as perdu. Le mot était : {secret}\n")


def run_ai_game(
    config: GameConfig,
    secret: str,
    guesser: Callable[[int], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Play a game where ``guesser`` proposes words of the configured length."""
    guesser = guesser if guesser is not None else generate_random_word
    out = out if out is not None else sys.stdout

    out.write("Mode IA activé. Deviner automatiquement...\n")
    for attempt in range(1, config.max_attempts + 1):
        guess = guesser(config.word_length)
        out.write(f"Essai IA {attempt} : {guess}\n")
        display_result(guess, evaluate_guess(secret, guess), out)
        if guess == secret:
            out.write("IA a trouvé le mot !\n")
            return
    out.write(f"IA a échoué. Le mot était : {secret}\n")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordguess", description="Devine le mot secret.")
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY)
    parser.add_argument("--length", type=int, default=5)
    parser.add_argument("--attempts", type=int, default=6)
    parser.add_argument("--random", action="store_true", help="mot secret aléatoire")
    parser.add_argument("--ai", action="store_true", help="laisser l'IA jouer")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from the command line."""
    args = _parse_args(argv)
    config = GameConfig(
        word_length=args.length,
        max_attempts=args.attempts,
        use_dictionary=not args.random,
        human_player=not args.ai,
    )

    if config.use_dictionary:
        try:
            word = generate_word_from_dictionary(args.dictionary, config.word_length)
        except (OSError, ValueError) as err:
            print("Erreur:", err)
            return 1
    else:
        word = generate_random_word(config.word_length)

    if config.human_player:
        run_human_game(config, word)
    else:
        run_ai_game(config, word)
    return 0


if __name__ == "__main__":
    sys.exit(main())