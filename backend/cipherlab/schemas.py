from pydantic import BaseModel
from typing import List, Union

class CaesarKey(BaseModel):
    shift: int

class CaesarEncryptRequest(CaesarKey):
    plaintext: str

class CaesarDecryptRequest(CaesarKey):
    ciphertext: str

class AffineKey(BaseModel):
    a: int
    b: int

class AffineEncryptRequest(AffineKey):
    plaintext: str

class AffineDecryptRequest(AffineKey):
    ciphertext: str

class PlayfairKey(BaseModel):
    key: str

class PlayfairEncryptRequest(PlayfairKey):
    plaintext: str

class PlayfairDecryptRequest(PlayfairKey):
    ciphertext: str

class PlayfairKeySquareResult(BaseModel):
    key: str
    square: List[List[str]] # 5x5

class HillKey(BaseModel):
    key: Union[str, List[List[int]]] # "HILL" or [[7, 8], [11, 11]]

class HillEncryptRequest(HillKey):
    plaintext: str

class HillDecryptRequest(HillKey):
    ciphertext: str

class HillCrackRequest(BaseModel):
    known_plaintext: str
    known_ciphertext: str

class HillKeyResult(BaseModel):
    matrix: List[List[int]] # 2x2, entries in [0, 25]
    key_string: str

class EncryptionResult(BaseModel):
    ciphertext: str

class DecryptionResult(BaseModel):
    plaintext: str
