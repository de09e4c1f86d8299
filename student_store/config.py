import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_file: str = "student.log"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", 8080)),
            log_file=env.get("STUDENT_LOG_FILE", "student.log"),
            cors_allow_origins=_split_origins(env.get("CORS_ALLOW_ORIGINS", "*")),
        )
