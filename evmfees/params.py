# Fee module protocol constants and parameter defaults.

SHA3_GAS = 30  # Once per SHA3 operation.
SHA3_WORD_GAS = 6  # Once per word of the SHA3 operation's data.

# Cost for executing `crypto.CreateAddress`,
# must be at least 36 gas for the contained keccak256(word) operation
MIN_ADDR_DERIVATION_COST_CREATE = SHA3_GAS + SHA3_WORD_GAS

DEC_PRECISION = 18  # Number of decimal places of a chain decimal.
MAX_UINT64 = 2**64 - 1

DEFAULT_ENABLE_FEES = False
DEFAULT_DEVELOPER_SHARES = (50, 2)  # 50%, as (integer, precision)
DEFAULT_VALIDATOR_SHARES = (50, 2)  # 50%
DEFAULT_ADDR_DERIVATION_COST_CREATE = 50
DEFAULT_MIN_GAS_PRICE = (0, 0)

# Parameter store keys
PARAM_STORE_KEY_ENABLE_FEES = "EnableFees"
PARAM_STORE_KEY_DEVELOPER_SHARES = "DeveloperShares"
PARAM_STORE_KEY_VALIDATOR_SHARES = "ValidatorShares"
PARAM_STORE_KEY_ADDR_DERIVATION_COST_CREATE = "AddrDerivationCostCreate"
PARAM_STORE_KEY_MIN_GAS_PRICE = "MinGasPrice"
