import sys
from app.core.security import hash_password, verify_password


def driver_env_line(password: str) -> str:
    hashed_password = hash_password(password)
    if not verify_password(password, hashed_password):
        raise ValueError("Generated hash does not verify")
    return f"DRIVER_PASSWORD_HASH='{hashed_password}'"


def main():
    if len(sys.argv) < 2:
        print("Usage: python create_driver_hash.py <password>")
        sys.exit(1)

    password = sys.argv[1]

    if len(password) < 8:
        print("Error: password must be at least 8 characters")
        sys.exit(1)

    print("Add this line to .env to enable the driver back-office:")
    print(driver_env_line(password))


if __name__ == "__main__":
    main()
