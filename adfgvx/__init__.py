from .main import *
from .errors import (
    ADFGVXError,
    CipherResult,
    InvalidKey,
    InvalidSymbol,
    KeyProblem,
    TruncationWarning,
    UnmappableCharacter,
)
from .api_strings import (
    check_key,
    clean_cipher_text,
    clean_text,
    decrypt,
    encrypt,
    key_schedule,
    try_decrypt,
    try_encrypt,
    validate_key,
)
from .api_files import decryptfile, encryptfile, handlefiles
from .version import __version__
