# ADFGVX FIELD CIPHER ENGINE ->

import os as _os_module
import re as _re_module
import warnings as _warnings_module
from dataclasses import dataclass as _dataclass

from .errors import (
    ADFGVXError,
    CipherResult,
    InvalidKey,
    InvalidSymbol,
    KeyProblem,
    TruncationWarning,
    UnmappableCharacter,
)


@_dataclass(frozen=True)
class KeySchedule:
    key: str
    sorted_key: str
    sorted_indices: tuple
    original_indices: tuple

    def __len__(self) -> int:
        return len(self.key)


class adfgvx:
    import concurrent.futures
    import os
    import pathlib
    import sys
    import threading
    import time
    import typing
    import numpy as np
    import colorama
    re = _re_module

    @staticmethod
    def _env_int(name: str) -> "adfgvx.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    MAX_INPUT_BYTES = 64 * 1024 * 1024  # whole files are held in memory
    PROGRESS_BAR_WIDTH = 30
    ALPHABET = "ADFGVX"
    POLYBIUS_SQUARE = (
        "PH0QG6",
        "4MEA1Y",
        "L2NOFD",
        "XKR3CV",
        "S5ZW7B",
        "J9UTI8",
    )
    KEY_MIN_LENGTH = 5
    KEY_MAX_LENGTH = 16
    ENCRYPTED_BASENAME = "encrypted"
    DECRYPTED_BASENAME = "decrypted"
    OUTPUT_SUFFIX = ".txt"
    _CPU_COUNT = max(1, os.cpu_count() or 1)
    _KEY_PATTERN = re.compile(r"[A-Za-z0-9]+")
    _PLAIN_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9]")
    _WHITESPACE_PATTERN = re.compile(r"\s+")
    _SYMBOL_INDEX: typing.ClassVar[dict[str, int]] = {s: i for i, s in enumerate(ALPHABET)}
    _CHAR_POSITIONS: typing.ClassVar[dict[str, "tuple[int, int]"]] = {
        char: (row, col)
        for row, cells in enumerate(POLYBIUS_SQUARE)
        for col, char in enumerate(cells)
    }

    class _ProgressReporter:
        """Two-bar textual progress reporter (overall and current file)."""

        def __init__(self, total_files: int, stream=None, min_interval: float = 0.1):
            self.total_files = max(total_files, 1)
            self.stream = stream or adfgvx.sys.stdout
            self._printed = False
            self._min_interval = max(0.0, float(min_interval))
            self._is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
            self._last_render = 0.0
            self._last_fraction: dict[int, float] = {}
            self._lock = adfgvx.threading.Lock()
            try:
                import shutil
                self._term_width = shutil.get_terminal_size().columns
            except Exception:
                self._term_width = 80
            self._green = adfgvx.colorama.Fore.GREEN
            self._reset = adfgvx.colorama.Fore.RESET
            term = adfgvx.os.getenv("TERM")
            self._supports_ansi = self._is_tty and (
                adfgvx.os.name != "nt"
                or adfgvx.os.getenv("WT_SESSION")
                or (term and term != "dumb")
            )

        def _render_bar(self, fraction: float, width: int | None = None) -> str:
            width = width or adfgvx.PROGRESS_BAR_WIDTH
            fraction = max(0.0, min(1.0, fraction))
            filled = int(fraction * width)
            if filled >= width and self._supports_ansi:
                return f"({self._green}{'#' * width}{self._reset})"
            return f"({'#' * filled}{'.' * (width - filled)})"

        def _write(self, line1: str, line2: str, force: bool = False) -> None:
            now = adfgvx.time.monotonic()
            if not force and self._printed and (now - self._last_render) < self._min_interval:
                return
            line1 = line1[:self._term_width]
            line2 = line2[:self._term_width]
            if self._supports_ansi:
                if self._printed:
                    self.stream.write("\x1b[1A\r")
                else:
                    self.stream.write("\r\x1b[2K")
                self.stream.write("\r\x1b[2K" + line1 + "\n")
                self.stream.write("\r\x1b[2K" + line2)
                self.stream.flush()
            elif not self._printed or force:
                # Non-TTY: only the first and the forced (final) renders are printed
                self.stream.write(line1 + "\n")
                self.stream.write(line2 + "\n")
                self.stream.flush()
            self._printed = True
            self._last_render = now

        def update(self, file_index: int, fraction: float, phase: str, path: "adfgvx.pathlib.Path") -> None:
            fraction = max(0.0, min(1.0, float(fraction)))
            with self._lock:
                self._last_fraction[file_index] = fraction
                overall_fraction = sum(self._last_fraction.values()) / self.total_files
                completed = sum(1 for frac in self._last_fraction.values() if frac >= 1.0)
                label = path.name if path else ""
                line1 = (
                    f"Overall {self._render_bar(overall_fraction)} {overall_fraction * 100:3.0f}% "
                    f"{completed}/{self.total_files} files"
                )
                line2 = f"File    {self._render_bar(fraction)} {fraction * 100:3.0f}% phase: {phase} [{label}]"
                self._write(line1.replace("\n", " "), line2.replace("\n", " "))

        def finalize_file(self, file_index: int, path: "adfgvx.pathlib.Path") -> None:
            with self._lock:
                self._last_fraction[file_index] = 1.0
                overall_fraction = sum(self._last_fraction.values()) / self.total_files
                completed = sum(1 for frac in self._last_fraction.values() if frac >= 1.0)
                label = path.name if path else ""
                line1 = (
                    f"Overall {self._render_bar(overall_fraction)} {overall_fraction * 100:3.0f}% "
                    f"{completed}/{self.total_files} files"
                )
                line2 = f"File    {self._render_bar(1.0)} 100% phase: done [{label}] ✓"
                self._write(line1, line2, force=True)
                self.stream.write("\n")
                self.stream.flush()
                self._printed = False

    # SUBSTITUTION TABLE

    @staticmethod
    def encode_char(char: str) -> "tuple[str, str]":
        """Map one plaintext character to its (row symbol, column symbol) pair."""
        position = adfgvx._CHAR_POSITIONS.get(char)
        if position is None:
            raise UnmappableCharacter(char)
        row, col = position
        return adfgvx.ALPHABET[row], adfgvx.ALPHABET[col]

    @staticmethod
    def decode_pair(row_symbol: str, col_symbol: str) -> str:
        """Map a symbol pair back to the grid character it labels."""
        row = adfgvx._SYMBOL_INDEX.get(row_symbol)
        if row is None:
            raise InvalidSymbol(row_symbol)
        col = adfgvx._SYMBOL_INDEX.get(col_symbol)
        if col is None:
            raise InvalidSymbol(col_symbol)
        return adfgvx.POLYBIUS_SQUARE[row][col]

    @staticmethod
    def render_square() -> str:
        lines = ["    " + " ".join(adfgvx.ALPHABET)]
        for label, cells in zip(adfgvx.ALPHABET, adfgvx.POLYBIUS_SQUARE):
            lines.append(f"{label}   " + " ".join(cells))
        return "\n".join(lines)

    # KEY SCHEDULE

    @staticmethod
    def validate_key(key: str) -> "adfgvx.typing.Optional[KeyProblem]":
        """
        Return the first problem with ``key`` or ``None`` when it is usable.

        Checks run in a fixed order (length floor, length ceiling, alphabet,
        duplicates) and stop at the first failure, so an over-long key is
        never also reported for duplicates. Duplicates are case-sensitive.
        """
        if not isinstance(key, str):
            raise TypeError(f"Key must be a string, not {type(key).__name__}")
        if len(key) < adfgvx.KEY_MIN_LENGTH:
            return KeyProblem.TOO_SHORT
        if len(key) > adfgvx.KEY_MAX_LENGTH:
            return KeyProblem.TOO_LONG
        if not adfgvx._KEY_PATTERN.fullmatch(key):
            return KeyProblem.NOT_ALPHANUMERIC
        if len(set(key)) != len(key):
            return KeyProblem.HAS_DUPLICATES
        return None

    @staticmethod
    def check_key(key: str) -> str:
        problem = adfgvx.validate_key(key)
        if problem is not None:
            raise InvalidKey(key, problem)
        return key

    @staticmethod
    def sort_key(key: str) -> str:
        return "".join(sorted(key))

    @staticmethod
    def sorted_column_origins(original_key: str, sorted_key: str) -> "list[int]":
        """For each sorted position, the first unclaimed original column holding that character."""
        claimed = [False] * len(original_key)
        origins = []
        for char in sorted_key:
            for j, candidate in enumerate(original_key):
                if not claimed[j] and candidate == char:
                    claimed[j] = True
                    origins.append(j)
                    break
            else:
                raise ValueError(f"{char!r} has no unclaimed column in {original_key!r}")
        return origins

    @staticmethod
    def invert_permutation(indices: "adfgvx.typing.Sequence[int]") -> "list[int]":
        inverse = [0] * len(indices)
        for position, origin in enumerate(indices):
            inverse[origin] = position
        return inverse

    @staticmethod
    def key_schedule(key: str) -> KeySchedule:
        adfgvx.check_key(key)
        sorted_key = adfgvx.sort_key(key)
        sorted_indices = adfgvx.sorted_column_origins(key, sorted_key)
        return KeySchedule(
            key=key,
            sorted_key=sorted_key,
            sorted_indices=tuple(sorted_indices),
            original_indices=tuple(adfgvx.invert_permutation(sorted_indices)),
        )

    # WORK MATRIX

    @staticmethod
    def truncate_to_multiple_of(length: int, divisor: int) -> int:
        """
        Largest multiple of ``divisor`` not above ``length``.

        The transposition matrix has no padding row, so up to ``divisor - 1``
        trailing characters are dropped on every encrypt and decrypt. Inputs
        whose symbol count is already a multiple of the key length round-trip
        exactly; anything else loses its tail.
        """
        if divisor <= 0:
            raise ValueError("divisor must be positive")
        return length - length % divisor

    @staticmethod
    def _sized_matrix(content: str, header: str) -> "tuple[adfgvx.np.ndarray, str]":
        columns = len(header)
        effective = content[:adfgvx.truncate_to_multiple_of(len(content), columns)]
        rows = len(effective) // columns + 1
        matrix = adfgvx.np.empty((rows, columns), dtype="<U1")
        matrix[0] = list(header)
        return matrix, effective

    @staticmethod
    def _cells(text: str) -> "adfgvx.np.ndarray":
        return adfgvx.np.array(list(text), dtype="<U1")

    @staticmethod
    def fill_rows(content: str, header: str) -> "adfgvx.np.ndarray":
        matrix, effective = adfgvx._sized_matrix(content, header)
        matrix[1:] = adfgvx._cells(effective).reshape(matrix.shape[0] - 1, matrix.shape[1])
        return matrix

    @staticmethod
    def fill_columns(content: str, header: str) -> "adfgvx.np.ndarray":
        matrix, effective = adfgvx._sized_matrix(content, header)
        matrix[1:] = adfgvx._cells(effective).reshape(matrix.shape[1], matrix.shape[0] - 1).T
        return matrix

    @staticmethod
    def reorder_columns(matrix: "adfgvx.np.ndarray", indices: "adfgvx.typing.Sequence[int]") -> "adfgvx.np.ndarray":
        """Destination column ``c`` takes source column ``indices[c]``, header row included."""
        return matrix[:, list(indices)]

    @staticmethod
    def read_columns(matrix: "adfgvx.np.ndarray") -> str:
        return "".join(matrix[1:].T.ravel())

    @staticmethod
    def read_rows(matrix: "adfgvx.np.ndarray") -> str:
        return "".join(matrix[1:].ravel())

    # CIPHER TRANSFORM

    @staticmethod
    def substitute(plaintext: str) -> str:
        symbols = []
        for char in plaintext:
            symbols.extend(adfgvx.encode_char(char))
        return "".join(symbols)

    @staticmethod
    def restore(symbols: str) -> str:
        # An unpaired trailing symbol is dropped
        return "".join(
            adfgvx.decode_pair(symbols[i], symbols[i + 1])
            for i in range(0, len(symbols) - 1, 2)
        )

    @staticmethod
    def cipher_text_problems(text: str) -> "tuple[int, adfgvx.typing.Optional[str]]":
        """Count characters outside ADFGVX and return the first offender."""
        bad = [char for char in text if char not in adfgvx._SYMBOL_INDEX]
        return len(bad), (bad[0] if bad else None)

    @staticmethod
    def encrypt(plaintext: str, key: str) -> str:
        schedule = adfgvx.key_schedule(key)
        symbols = adfgvx.substitute(plaintext)
        matrix = adfgvx.fill_rows(symbols, schedule.key)
        reordered = adfgvx.reorder_columns(matrix, schedule.sorted_indices)
        return adfgvx.read_columns(reordered)

    @staticmethod
    def decrypt(ciphertext: str, key: str) -> str:
        schedule = adfgvx.key_schedule(key)
        count, first = adfgvx.cipher_text_problems(ciphertext)
        if count:
            raise InvalidSymbol(first, count)
        matrix = adfgvx.fill_columns(ciphertext, schedule.sorted_key)
        restored = adfgvx.reorder_columns(matrix, schedule.original_indices)
        return adfgvx.restore(adfgvx.read_rows(restored))

    @staticmethod
    def try_encrypt(plaintext: str, key: str) -> CipherResult:
        try:
            return CipherResult(True, adfgvx.encrypt(plaintext, key))
        except ADFGVXError as exc:
            return CipherResult(False, error=exc)

    @staticmethod
    def try_decrypt(ciphertext: str, key: str) -> CipherResult:
        try:
            return CipherResult(True, adfgvx.decrypt(ciphertext, key))
        except ADFGVXError as exc:
            return CipherResult(False, error=exc)

    # TEXT PREPARATION

    @staticmethod
    def clean_text(raw: str) -> str:
        """Drop everything but ASCII letters and digits, then uppercase."""
        return adfgvx._PLAIN_STRIP_PATTERN.sub("", raw).upper()

    @staticmethod
    def clean_cipher_text(raw: str) -> str:
        """Join cipher text lines and uppercase; foreign characters are left for ``decrypt`` to reject."""
        return adfgvx._WHITESPACE_PATTERN.sub("", raw).upper()

    @staticmethod
    def _warn_if_truncated(label: str, length: int, key: str) -> None:
        dropped = length - adfgvx.truncate_to_multiple_of(length, len(key))
        if dropped:
            _warnings_module.warn(
                f"{label}: dropped {dropped} trailing symbol(s) to fit a {len(key)}-column matrix",
                TruncationWarning,
                stacklevel=3,
            )

    @staticmethod
    def _surface_warnings(fn, *args, **kwargs):
        with _warnings_module.catch_warnings(record=True) as caught:
            _warnings_module.simplefilter("always", UserWarning)
            result = fn(*args, **kwargs)
        for item in caught:
            msg = str(item.message).strip()
            if msg:
                print(f"⚠ {msg}", file=adfgvx.sys.stderr)
        return result

    # FILES

    @staticmethod
    def _normalize_path(path_like: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]") -> "adfgvx.pathlib.Path":
        if isinstance(path_like, adfgvx.pathlib.Path):
            path = path_like
        else:
            path = adfgvx.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except Exception:
            return path

    @staticmethod
    def _ensure_existing_file(path: "adfgvx.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def _ensure_size_limit(path: "adfgvx.pathlib.Path", max_bytes: "adfgvx.typing.Optional[int]" = None) -> None:
        limit = max_bytes or adfgvx.MAX_INPUT_BYTES
        size = path.stat().st_size
        if size > limit:
            raise ValueError(f"{path.name} is {size} bytes, exceeding the {limit} byte limit")

    @staticmethod
    def _ensure_output_dir(path: "adfgvx.pathlib.Path") -> "adfgvx.pathlib.Path":
        if path.exists() and not path.is_dir():
            raise NotADirectoryError(f"{path} exists but is not a directory")
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _coerce_file_list(files) -> "adfgvx.typing.List[adfgvx.pathlib.Path]":
        if isinstance(files, (str, adfgvx.pathlib.Path)):
            candidates = [files]
        else:
            candidates = list(files)
        if not candidates:
            raise ValueError("No files provided")
        return [adfgvx._normalize_path(item) for item in candidates]

    @staticmethod
    def _expand_inputs(paths: "adfgvx.typing.List[adfgvx.pathlib.Path]") -> "adfgvx.typing.List[adfgvx.pathlib.Path]":
        # Directories contribute their direct child files in name order; repeats keep the first position
        expanded = []
        for path in paths:
            if path.is_dir():
                expanded.extend(sorted(child for child in path.iterdir() if child.is_file()))
            else:
                expanded.append(path)
        return list(dict.fromkeys(expanded))

    @staticmethod
    def next_output_paths(
            directory: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]",
            basename: str,
            count: int = 1
    ) -> "adfgvx.typing.List[adfgvx.pathlib.Path]":
        """First ``count`` unused ``<basename>N.txt`` names in ``directory``, N counting from 1."""
        directory = adfgvx._normalize_path(directory)
        names = []
        counter = 1
        while len(names) < count:
            candidate = directory / f"{basename}{counter}{adfgvx.OUTPUT_SUFFIX}"
            if not candidate.exists():
                names.append(candidate)
            counter += 1
        return names

    @staticmethod
    def read_text_file(path: "adfgvx.pathlib.Path") -> str:
        adfgvx._ensure_existing_file(path)
        adfgvx._ensure_size_limit(path)
        return path.read_text(encoding="utf-8", errors="replace")

    @staticmethod
    def _encrypt_path(
            source: "adfgvx.pathlib.Path",
            key: str,
            output_path: "adfgvx.pathlib.Path",
            reporter: "adfgvx.typing.Optional[adfgvx._ProgressReporter]" = None,
            file_index: int = 0
    ) -> "adfgvx.pathlib.Path":
        if reporter:
            reporter.update(file_index, 0.1, "reading", source)
        plaintext = adfgvx.clean_text(adfgvx.read_text_file(source))
        if reporter:
            reporter.update(file_index, 0.4, "encrypting", source)
        ciphertext = adfgvx.encrypt(plaintext, key)
        adfgvx._warn_if_truncated(source.name, 2 * len(plaintext), key)
        if reporter:
            reporter.update(file_index, 0.8, "writing", source)
        output_path.write_text(ciphertext, encoding="utf-8")
        if reporter:
            reporter.finalize_file(file_index, source)
        return output_path

    @staticmethod
    def _decrypt_path(
            source: "adfgvx.pathlib.Path",
            key: str,
            output_path: "adfgvx.pathlib.Path",
            reporter: "adfgvx.typing.Optional[adfgvx._ProgressReporter]" = None,
            file_index: int = 0
    ) -> "adfgvx.pathlib.Path":
        if reporter:
            reporter.update(file_index, 0.1, "reading", source)
        ciphertext = adfgvx.clean_cipher_text(adfgvx.read_text_file(source))
        if reporter:
            reporter.update(file_index, 0.4, "decrypting", source)
        plaintext = adfgvx.decrypt(ciphertext, key)
        adfgvx._warn_if_truncated(source.name, len(ciphertext), key)
        if reporter:
            reporter.update(file_index, 0.8, "writing", source)
        output_path.write_text(plaintext, encoding="utf-8")
        if reporter:
            reporter.finalize_file(file_index, source)
        return output_path

    @staticmethod
    def encrypt_file(
            file: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]",
            key: str,
            output_dir: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]"
    ) -> "adfgvx.pathlib.Path":
        source = adfgvx._normalize_path(file)
        adfgvx.check_key(key)
        out_dir = adfgvx._ensure_output_dir(adfgvx._normalize_path(output_dir))
        target = adfgvx.next_output_paths(out_dir, adfgvx.ENCRYPTED_BASENAME)[0]
        return adfgvx._encrypt_path(source, key, target)

    @staticmethod
    def decrypt_file(
            file: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]",
            key: str,
            output_dir: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]"
    ) -> "adfgvx.pathlib.Path":
        source = adfgvx._normalize_path(file)
        adfgvx.check_key(key)
        out_dir = adfgvx._ensure_output_dir(adfgvx._normalize_path(output_dir))
        target = adfgvx.next_output_paths(out_dir, adfgvx.DECRYPTED_BASENAME)[0]
        return adfgvx._decrypt_path(source, key, target)

    @staticmethod
    def _resolve_workers(total: int, workers: "adfgvx.typing.Optional[int]" = None) -> int:
        limit = workers or adfgvx._env_int("ADFGVX_WORKERS") or adfgvx._CPU_COUNT
        return max(1, min(total, limit))

    @staticmethod
    def cipher_files(
            files: "adfgvx.typing.Union[str, adfgvx.pathlib.Path, adfgvx.typing.Iterable[adfgvx.typing.Union[str, adfgvx.pathlib.Path]]]",
            key: str,
            output_dir: "adfgvx.typing.Union[str, adfgvx.pathlib.Path]",
            decrypt: bool = False,
            silent: bool = False,
            workers: "adfgvx.typing.Optional[int]" = None
    ):
        """
        Encrypt (or decrypt) every file named by ``files`` into ``output_dir``.

        Directories are expanded to their direct child files. Each input gets
        its own ``encryptedN.txt`` / ``decryptedN.txt`` output, reserved in
        input order before any work starts. Returns ``"SUCCESS!"`` or a
        ``"FAIL! <reason>"`` string when ``files`` names exactly one file,
        otherwise a dict of those statuses keyed by expanded input path.
        Repeated paths are processed once.
        """
        paths = adfgvx._coerce_file_list(files)
        single = len(paths) == 1 and not paths[0].is_dir()
        inputs = adfgvx._expand_inputs(paths)
        problem = adfgvx.validate_key(key)
        if problem is not None:
            status = f"FAIL! {InvalidKey(key, problem)}"
            if not silent:
                print(status)
            return status if single else {str(p): status for p in inputs}
        if not inputs:
            return {}

        out_dir = adfgvx._ensure_output_dir(adfgvx._normalize_path(output_dir))
        basename = adfgvx.DECRYPTED_BASENAME if decrypt else adfgvx.ENCRYPTED_BASENAME
        targets = adfgvx.next_output_paths(out_dir, basename, len(inputs))
        worker = adfgvx._decrypt_path if decrypt else adfgvx._encrypt_path

        reporter = adfgvx._ProgressReporter(len(inputs)) if not silent else None

        def _process(item: "tuple[int, adfgvx.pathlib.Path]") -> "tuple[str, str]":
            idx, path = item
            try:
                worker(path, key, targets[idx], reporter, idx)
                return str(path), "SUCCESS!"
            except (OSError, ValueError) as exc:
                if reporter:
                    reporter.update(idx, 0.0, f"error: {exc}", path)
                    reporter.finalize_file(idx, path)
                return str(path), f"FAIL! {exc}"

        items = list(enumerate(inputs))
        max_workers = adfgvx._resolve_workers(len(items), workers)
        results: dict[str, str] = {}
        if len(items) > 1 and max_workers > 1:
            with adfgvx.concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
                for file_id, status in executor.map(_process, items):
                    results[file_id] = status
        else:
            for item in items:
                file_id, status = _process(item)
                results[file_id] = status

        return results[str(inputs[0])] if single else results

    @staticmethod
    def _resolve_key(key: "adfgvx.typing.Optional[str]", fallback: "adfgvx.typing.Optional[str]" = None) -> str:
        if not key:
            key = _os_module.getenv("ADFGVX_KEY") or fallback or ""
        if not key:
            raise ValueError("Key required: pass -k/--key, set ADFGVX_KEY or add key= to the CLI config")
        if _os_module.path.isfile(key):
            with open(key, "r", encoding="utf-8") as handle:
                key = handle.read().strip()
        return key



def cli(argv=None) -> int:
    import argparse

    def _cli_config_path() -> "adfgvx.pathlib.Path":
        cfg = _os_module.getenv("ADFGVX_CLI_CONFIG")
        if cfg:
            return adfgvx.pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return adfgvx.pathlib.Path(xdg) / "adfgvx" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return adfgvx.pathlib.Path(appdata) / "adfgvx" / "cli.conf"
        return adfgvx.pathlib.Path("~/.config/adfgvx/cli.conf").expanduser()

    def _cli_config() -> "dict[str, str]":
        values = {}
        cfg_path = _cli_config_path()
        try:
            if not cfg_path.exists():
                return values
            for line in cfg_path.read_text(encoding="utf-8").splitlines():
                name, sep, value = line.partition("=")
                if sep and not name.strip().startswith("#"):
                    values[name.strip().lower()] = value.strip()
        except OSError:
            pass
        return values

    config = _cli_config()

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("ADFGVX_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("ADFGVX_CLI_STYLE") or config.get("style") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "on"}:
            return False
        return config.get("plain", "").lower() in {"1", "true", "yes"}

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            colors = adfgvx.colorama
            self.reset = "" if plain else colors.Style.RESET_ALL
            self.bold = "" if plain else colors.Style.BRIGHT
            self.red = "" if plain else colors.Fore.RED
            self.green = "" if plain else colors.Fore.GREEN
            self.yellow = "" if plain else colors.Fore.YELLOW

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

    theme = _CliTheme(_cli_plain_mode())
    if not theme.plain:
        adfgvx.colorama.just_fix_windows_console()

    parser = argparse.ArgumentParser(prog="adfgvx", description="ADFGVX field cipher toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encrypt", help="Encrypt text (non-alphanumerics are stripped, letters uppercased)")
    enc.add_argument("text", help="Plaintext")
    enc.add_argument("-k", "--key", default="", help="Key text or path to a key file")

    dec = subparsers.add_parser("decrypt", help="Decrypt ADFGVX cipher text")
    dec.add_argument("text", help="Cipher text (whitespace is ignored)")
    dec.add_argument("-k", "--key", default="", help="Key text or path to a key file")

    cryptin = subparsers.add_parser(
        "cryptin",
        help="Encrypt/decrypt files or directories into an output directory"
    )
    cryptin.add_argument("mode", choices=["encrypt", "decrypt"], help="Direction")
    cryptin.add_argument("paths", nargs="+", help="Input files or directories")
    cryptin.add_argument("-o", "--output", required=True, help="Output directory (created if missing)")
    cryptin.add_argument("-k", "--key", default="", help="Key text or path to a key file")
    cryptin.add_argument("--silent", action="store_true", help="Disable progress output")
    cryptin.add_argument("--workers", type=int, default=None, help="Maximum worker threads")

    check = subparsers.add_parser("check-key", help="Validate a key")
    check.add_argument("key", help="Key to validate")

    subparsers.add_parser("square", help="Print the Polybius square")

    args = parser.parse_args(argv)

    if args.command == "square":
        print(adfgvx.render_square())
        return 0

    if args.command == "check-key":
        problem = adfgvx.validate_key(args.key)
        if problem is None:
            print(theme.ok(f"Key {args.key!r} is valid"))
            return 0
        print(theme.err(str(InvalidKey(args.key, problem))))
        return 1

    try:
        key = adfgvx._resolve_key(args.key, config.get("key"))
    except (OSError, ValueError) as exc:
        print(theme.err(str(exc)))
        return 1

    if args.command == "encrypt":
        plaintext = adfgvx.clean_text(args.text)
        result = adfgvx.try_encrypt(plaintext, key)
        if not result.ok:
            print(theme.err(f"Encryption failed: {result.error}"))
            return 1
        adfgvx._surface_warnings(adfgvx._warn_if_truncated, "input", 2 * len(plaintext), key)
        print(result.text)
        return 0

    if args.command == "decrypt":
        ciphertext = adfgvx.clean_cipher_text(args.text)
        result = adfgvx.try_decrypt(ciphertext, key)
        if not result.ok:
            print(theme.err(f"Decryption failed: {result.error}"))
            return 1
        adfgvx._surface_warnings(adfgvx._warn_if_truncated, "input", len(ciphertext), key)
        print(result.text)
        return 0

    if args.command == "cryptin":
        try:
            result = adfgvx._surface_warnings(
                adfgvx.cipher_files,
                args.paths,
                key,
                args.output,
                decrypt=args.mode == "decrypt",
                silent=args.silent,
                workers=args.workers
            )
        except (OSError, ValueError) as exc:
            print(theme.err(f"cryptin {args.mode} failed: {exc}"))
            return 1

        if isinstance(result, dict):
            if not result:
                print(theme.warn("No input files found"))
                return 1
            failures = 0
            for path, status in result.items():
                if status == "SUCCESS!":
                    print(theme.ok(f"{path}: {status}"))
                else:
                    print(theme.err(f"{path}: {status}"))
                    failures += 1
            return 0 if failures == 0 else 1

        if result == "SUCCESS!":
            print(theme.ok(result))
        else:
            print(theme.err(result))
        return 0 if result == "SUCCESS!" else 1

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


__all__ = ["KeySchedule", "adfgvx", "cli", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
