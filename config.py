import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration"""
    # Security - MUST be set in environment for production
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-secret-key')

    # Debug mode - default to False for safety
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
    TESTING = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Session configuration
    SESSION_PERMANENT = False

    # Assessment presentation
    ASSESSMENT_TITLE = os.environ.get('ASSESSMENT_TITLE', 'Procurement Analyst Assessment')
    TARGET_ROLE = os.environ.get('TARGET_ROLE', 'Procurement Analyst')
    ESTIMATED_DURATION = os.environ.get('ESTIMATED_DURATION', '~20 minutes')

    # Assessment dimensions shown on the landing page
    ASSESSMENT_DIMENSIONS = [
        "Psychometric Fit",
        "Technical Readiness",
        "Career Guidance"
    ]

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate that all required settings are present"""
        errors = []

        if not cls.SECRET_KEY:
            errors.append("SECRET_KEY is not set in environment variables")

        if cls.LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"LOG_LEVEL '{cls.LOG_LEVEL}' is not a valid logging level")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 1800


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    """Configuration used by the test suite"""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration class based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
        'default': DevelopmentConfig
    }

    config_class = config_map.get(env, config_map['default'])
    config_class.validate()
    return config_class
