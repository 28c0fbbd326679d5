from config import ApplicationConfig

# Cheap bcrypt rounds keep hashing fast in tests
ApplicationConfig.BCRYPT_ROUNDS = 4
