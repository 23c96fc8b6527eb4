import os


DEFAULT_CORS_ORIGINS = ','.join([
    'http://localhost:5173',
    'https://localhost:5173',
    'http://localhost:3000',
    'https://localhost:3000',
])


class Settings:
    # Absolute value of the cross product under which three coordinates are collinear
    COLLINEARITY_TOLERANCE: float = float(os.getenv('GEOVALIDITY_COLLINEARITY_TOLERANCE', '1e-10'))
    LOG_LEVEL: str = os.getenv('GEOVALIDITY_LOG_LEVEL', 'INFO')
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv('GEOVALIDITY_CORS_ORIGINS', DEFAULT_CORS_ORIGINS).split(',')
        if origin.strip()
    ]
