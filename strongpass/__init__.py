version = "1.0.0"

from .analyzer import Analysis, Checks, PasswordAnalyzer, Strength, analyze_password
from .generator import PasswordGenerator, generate_password

__all__ = ["Analysis", "Checks", "PasswordAnalyzer", "Strength", "analyze_password",
           "PasswordGenerator", "generate_password", "version"]
