from __future__ import annotations
import unicodedata

def normalize(text: str) -> str:
    """
    Normaliza texto para comparar (nunca para mostrar):
    - case-insensitive (AGUA == agua)
    - accent-insensitive (água == agua)
    No recorta espacios: eso le toca a quien llama.
    """
    s = unicodedata.normalize("NFKD", (text or "").lower())
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    # NFKD puede devolver mayúsculas de compatibilidad (ℌ -> H)
    return s.lower()
