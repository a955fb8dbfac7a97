from eth_utils import encode_hex, event_abi_to_log_topic

VALUE_UPDATED_EVENT_ABI = {
    "anonymous": False,
    "inputs": [
        {
            "indexed": False,
            "internalType": "uint256",
            "name": "newValue",
            "type": "uint256"
        }
    ],
    "name": "ValueUpdated",
    "type": "event"
}

# Read side of the SimpleStorage contract; setValue is submitted by the wallet.
SIMPLE_STORAGE_ABI = [
    VALUE_UPDATED_EVENT_ABI,
    {
        "inputs": [],
        "name": "getValue",
        "outputs": [
            {
                "internalType": "uint256",
                "name": "",
                "type": "uint256"
            }
        ],
        "stateMutability": "view",
        "type": "function"
    }
]

VALUE_UPDATED_TOPIC = encode_hex(event_abi_to_log_topic(VALUE_UPDATED_EVENT_ABI))
