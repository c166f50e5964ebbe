# suites.py
from typing import Dict

from errors import ConfigurationError

LATIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
IROHA = (
    "いろはにほへとちりぬるをわかよたれそつねならむうゐのおくやまけふこえてあさきゆめみしゑひもせすん"
)

# rotor counts include the M4's fixed fourth wheel
SUITES: Dict[str, Dict[str, object]] = {
    "I":  {"name": "Enigma I",  "alphabet": LATIN, "rotors": 3},
    "M4": {"name": "Enigma M4", "alphabet": LATIN, "rotors": 4},
}


def suite(model: str) -> Dict[str, object]:
    try:
        return SUITES[model.upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown model {model!r}. Expected one of {list(SUITES)}"
        ) from None
