from .adapters import Argon2PasswordEncoder, JwtTokenIssuer
