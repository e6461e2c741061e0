from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RPSLLex")
except PackageNotFoundError:
    version = "0.0.0"
