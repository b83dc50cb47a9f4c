import bcrypt

from finance_tracker.services.providers.protocols.password_encoder import IPasswordEncoder


class BcryptPasswordEncoder(IPasswordEncoder):
    rounds = 10

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), hashed_password.encode())
        except ValueError:
            # malformed stored hash or over-long password
            return False
