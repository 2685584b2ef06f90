"""Configuration constants for hardhat-environments library."""

# Named external inputs
PRIVATE_KEY_ENV = "RINKEBY_PRIVATE_KEY"
ETHERSCAN_API_KEY_ENV = "ETHERSCAN_API_KEY"
COINMARKETCAP_API_KEY_ENV = "COINMARKETCAP_API_KEY"
INFURA_KEY_ENV = "INFURA_KEY"
FORK_ENV = "HARDHAT_FORK"

# 32 zero bytes, hex encoded without prefix. Well-formed but never a usable key.
PLACEHOLDER_PRIVATE_KEY = "0" * 64

# Logical networks that run in-process or against a local daemon
IN_PROCESS_NETWORK = "hardhat"
LOCAL_NETWORK = "localhost"
FORKABLE_NETWORKS = (IN_PROCESS_NETWORK, LOCAL_NETWORK)

DEFAULT_NETWORK = IN_PROCESS_NETWORK
DEFAULT_RECORDS_ROOT = "deployments"

DEFAULT_PATHS = {
    "sources": "./contracts",
    "tests": "./test",
    "cache": "./cache",
    "artifacts": "./artifacts",
}

DEFAULT_COMPILER = {
    "version": "0.7.6",
    "optimizer_enabled": True,
    "optimizer_runs": 200,
}

DEFAULT_TEST_TIMEOUT = 2000000

# Bump whenever an endpoint, chain id or flag below changes
REGISTRY_VERSION = "2022.1"

# Shared network table for every project in the ecosystem.
# "url" may contain {infura_key}; "accounts" is True when the network signs
# with the deployer key.
NETWORK_TABLE = {
    "hardhat": {"url": None, "accounts": False},
    "localhost": {"url": None, "accounts": False},
    "development": {"url": "http://47.88.20.217:8545", "accounts": True},
    "testnet": {"url": "http://47.88.20.217:8545", "accounts": True},
    "labs": {"url": "http://47.88.20.217:8545", "accounts": True},
    "rinkeby": {"url": "http://123.57.44.197:18241", "accounts": True},
    "mainnet": {"url": "http://172.21.121.12:8545", "accounts": True},
    "bsctest": {
        "url": "https://data-seed-prebsc-1-s1.binance.org:8545",
        "accounts": True,
        "live": True,
        "save_deployments": True,
    },
    "bscstage": {
        "url": "https://bsc-dataseed.binance.org/",
        "chain_id": 56,
        "accounts": True,
        "live": True,
        "save_deployments": True,
    },
    "bsc": {
        "url": "https://bsc-dataseed.binance.org/",
        "chain_id": 56,
        "accounts": True,
        "live": True,
        "save_deployments": True,
    },
    "mumbai": {"url": "https://rpc-mumbai.maticvigil.com", "accounts": True},
    "polygon": {"url": "https://polygon-rpc.com/", "accounts": True},
    "ftmtest": {"url": "https://rpc.testnet.fantom.network/", "accounts": True},
    "ftm": {"url": "https://rpc.ankr.com/fantom/", "accounts": True},
    "arbtest": {"url": "https://rinkeby.arbitrum.io/rpc", "accounts": True},
    "arb": {"url": "https://arb1.arbitrum.io/rpc", "accounts": True},
    # Coverage launches its own ganache-cli client
    "coverage": {"url": "http://127.0.0.1:8555", "accounts": False},
}

_OPS_NETWORKS = ["hardhat", "localhost", "development", "testnet"]

# Per-project profiles. "overrides" patch entries of NETWORK_TABLE.
PROJECT_PROFILES = {
    "solidity-utils": {
        "compiler": {"optimizer_runs": 1000},
        "networks": ["hardhat", "localhost", "development", "rinkeby", "coverage"],
        "overrides": {"development": {"url": "http://123.57.44.197:18241"}},
        "named_accounts": {},
        "fork_support": False,
        "paths": DEFAULT_PATHS,
    },
    "solver": {
        "compiler": {"optimizer_runs": 200},
        "networks": _OPS_NETWORKS
        + ["labs", "mainnet", "bsctest", "bscstage", "bsc", "mumbai", "polygon", "coverage"],
        "overrides": {"polygon": {"url": "https://rpc-mainnet.maticvigil.com"}},
    },
    "upgrade-proxy": {
        "compiler": {"optimizer_runs": 1000},
        "networks": _OPS_NETWORKS
        + ["labs", "mainnet", "bsctest", "bscstage", "bsc", "mumbai", "polygon", "coverage"],
        "overrides": {
            "bsctest": {"live": None, "save_deployments": None},
            "bscstage": {"live": None, "save_deployments": None},
            "bsc": {"live": None, "save_deployments": None},
            "polygon": {"url": "https://rpc-mainnet.maticvigil.com"},
        },
        "named_accounts": {},
        "fork_support": False,
        "paths": DEFAULT_PATHS,
    },
    "marketplace-v2": {
        "compiler": {"optimizer_runs": 1},
        "networks": _OPS_NETWORKS
        + ["labs", "mainnet", "bsctest", "bscstage", "bsc", "mumbai", "polygon",
           "ftmtest", "ftm", "coverage"],
        "paths": DEFAULT_PATHS,
        "typechain_out": "typechain",
        "gas_reporter": {"currency": "USD", "gas_price": 40, "pricing_key": True},
    },
    "bond-voucher": {
        "compiler": {"optimizer_runs": 1},
        "networks": _OPS_NETWORKS
        + ["mainnet", "bsctest", "bscstage", "bsc", "mumbai", "polygon",
           "arbtest", "arb", "coverage"],
        "overrides": {
            "development": {"url": "https://rinkeby.infura.io/v3/{infura_key}"},
            "mainnet": {"url": "https://mainnet.infura.io/v3/{infura_key}"},
            "bsctest": {
                "url": "https://speedy-nodes-nyc.moralis.io/63fbfa7a2befc06f321c08fd/bsc/testnet"
            },
        },
        "typechain_out": "typechain",
        "gas_reporter": {"currency": "USD", "gas_price": 40},
    },
    "voucher-core": {
        "compiler": {"optimizer_runs": 1},
        "networks": _OPS_NETWORKS
        + ["mainnet", "bsctest", "bscstage", "bsc", "mumbai", "coverage"],
        "overrides": {"bsctest": {"url": "https://data-seed-prebsc-2-s2.binance.org:8545"}},
        "gas_reporter": {"currency": "USD", "gas_price": 40},
    },
}
