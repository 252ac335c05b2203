"""
Configuration settings for the answer grading service
"""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List


class Settings(BaseSettings):
    """Application settings using pydantic-settings"""
    
    # Server settings
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = True
    
    # CORS settings
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    
    # Project paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    QUESTIONS_FILE: Path = DATA_DIR / "questions.json"
    LOG_TO_FILE: bool = True
    
    # Matching thresholds
    FULL_MATCH_THRESHOLD: float = 0.95
    PARTIAL_MATCH_THRESHOLD: float = 0.80
    
    # Upper bound on submitted answer length (characters)
    MAX_ANSWER_LENGTH: int = 5000
    
    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
