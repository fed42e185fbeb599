from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from .errors import CipherError
from .schemas import (
    CaesarEncryptRequest, CaesarDecryptRequest,
    AffineEncryptRequest, AffineDecryptRequest,
    PlayfairKey, PlayfairEncryptRequest, PlayfairDecryptRequest, PlayfairKeySquareResult,
    HillEncryptRequest, HillDecryptRequest, HillCrackRequest, HillKeyResult,
    EncryptionResult, DecryptionResult,
)
from .alphabet import ALPHABET_SIZE, normalize_letters_only_upper
from .cipher_math import cipher_math
from .caesar_engine import Caesar
from .affine_engine import Affine
from .playfair_engine import build_key_square, Playfair
from .hill_engine import Hill, matrix_to_key_string
from .hill_cracker import crack_hill_key_known_plaintext
import numpy as np
import logging

# Configure logging
logger = logging.getLogger("uvicorn")

app = FastAPI(title="Classical Cipher Toolkit")

CORS_ORIGINS = ["*"]
EXPOSED_HEADERS = ["X-Cipher-Error"]

# Default inputs of the cipher panels
PRESETS = {
    "caesar": {"shift": 3, "text": "Hello, World!"},
    "affine": {"a": 17, "b": 20, "text": "AFFINE CIPHER"},
    "playfair": {"key": "MONARCHY", "text": "instrumentsx"},
    "hill": {"key": "HILL", "matrix": [[7, 8], [11, 11]], "text": "short example"},
    "hill_known_plaintext": {"known_plaintext": "short example", "known_ciphertext": "APADJTFTWLFJ"},
}

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=EXPOSED_HEADERS
)

def _rejected(operation: str, e: CipherError) -> HTTPException:
    kind = type(e).__name__
    logger.warning(f"⛔ {operation} rejected ({kind}): {e}")
    return HTTPException(status_code=400, detail=str(e), headers={"X-Cipher-Error": kind})

def _log_operation(operation: str, text: str):
    # Never log keys or full texts
    logger.info(f"🔐 {operation}: {len(normalize_letters_only_upper(text))} letters")

@app.get("/")
def read_root():
    return {
        "service": "Classical Cipher Toolkit",
        "ciphers": ["caesar", "affine", "playfair", "hill"],
        "crackers": ["hill_known_plaintext"]
    }

@app.get("/presets")
def get_presets():
    return PRESETS

# --- Caesar ---

@app.post("/caesar/encrypt", response_model=EncryptionResult)
def caesar_encrypt(req: CaesarEncryptRequest):
    _log_operation("caesar encrypt", req.plaintext)
    try:
        return {"ciphertext": Caesar(req.shift).encrypt(req.plaintext)}
    except CipherError as e:
        raise _rejected("caesar encrypt", e)

@app.post("/caesar/decrypt", response_model=DecryptionResult)
def caesar_decrypt(req: CaesarDecryptRequest):
    _log_operation("caesar decrypt", req.ciphertext)
    try:
        return {"plaintext": Caesar(req.shift).decrypt(req.ciphertext)}
    except CipherError as e:
        raise _rejected("caesar decrypt", e)

# --- Affine ---

@app.post("/affine/encrypt", response_model=EncryptionResult)
def affine_encrypt(req: AffineEncryptRequest):
    _log_operation("affine encrypt", req.plaintext)
    try:
        return {"ciphertext": Affine(req.a, req.b).encrypt(req.plaintext)}
    except CipherError as e:
        raise _rejected("affine encrypt", e)

@app.post("/affine/decrypt", response_model=DecryptionResult)
def affine_decrypt(req: AffineDecryptRequest):
    _log_operation("affine decrypt", req.ciphertext)
    try:
        return {"plaintext": Affine(req.a, req.b).decrypt(req.ciphertext)}
    except CipherError as e:
        raise _rejected("affine decrypt", e)

@app.get("/random-affine-key")
def get_random_affine_key():
    # Loop until 'a' is coprime with 26 (only those keys can be decrypted)
    while True:
        a = int(np.random.randint(1, ALPHABET_SIZE))
        if cipher_math.gcd(a, ALPHABET_SIZE) == 1:
            break
    b = int(np.random.randint(0, ALPHABET_SIZE))
    return {"a": a, "b": b}

# --- Playfair ---

@app.post("/playfair/encrypt", response_model=EncryptionResult)
def playfair_encrypt(req: PlayfairEncryptRequest):
    _log_operation("playfair encrypt", req.plaintext)
    try:
        return {"ciphertext": Playfair(req.key).encrypt(req.plaintext)}
    except CipherError as e:
        raise _rejected("playfair encrypt", e)

@app.post("/playfair/decrypt", response_model=DecryptionResult)
def playfair_decrypt(req: PlayfairDecryptRequest):
    _log_operation("playfair decrypt", req.ciphertext)
    try:
        return {"plaintext": Playfair(req.key).decrypt(req.ciphertext)}
    except CipherError as e:
        raise _rejected("playfair decrypt", e)

@app.post("/playfair/key-square", response_model=PlayfairKeySquareResult)
def playfair_key_square(req: PlayfairKey):
    try:
        square = build_key_square(req.key)
    except CipherError as e:
        raise _rejected("playfair key square", e)
    return {"key": req.key, "square": square.rows()}

# --- Hill ---

@app.post("/hill/encrypt", response_model=EncryptionResult)
def hill_encrypt(req: HillEncryptRequest):
    _log_operation("hill encrypt", req.plaintext)
    try:
        return {"ciphertext": Hill(req.key).encrypt(req.plaintext)}
    except CipherError as e:
        raise _rejected("hill encrypt", e)

@app.post("/hill/decrypt", response_model=DecryptionResult)
def hill_decrypt(req: HillDecryptRequest):
    _log_operation("hill decrypt", req.ciphertext)
    try:
        return {"plaintext": Hill(req.key).decrypt(req.ciphertext)}
    except CipherError as e:
        raise _rejected("hill decrypt", e)

@app.post("/hill/crack", response_model=HillKeyResult)
def hill_crack(req: HillCrackRequest):
    _log_operation("hill known-plaintext crack", req.known_plaintext)
    try:
        recovered = crack_hill_key_known_plaintext(req.known_plaintext, req.known_ciphertext)
    except CipherError as e:
        raise _rejected("hill known-plaintext crack", e)
    logger.info(f"✅ Recovered Hill key {recovered.key_string}")
    return {"matrix": recovered.matrix, "key_string": recovered.key_string}

@app.get("/random-hill-key", response_model=HillKeyResult)
def get_random_hill_key():
    # Loop until we find a matrix whose determinant is coprime with 26
    while True:
        matrix = np.random.randint(0, ALPHABET_SIZE, (2, 2)).tolist()
        if cipher_math.is_invertible(matrix):
            break
    return {"matrix": matrix, "key_string": matrix_to_key_string(matrix)}
