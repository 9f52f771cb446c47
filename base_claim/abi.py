CLAIM_ABI = [
    {
        "inputs": [
            {"internalType": "bytes32[]", "name": "_proof", "type": "bytes32[]"},
            {"internalType": "address", "name": "_to", "type": "address"},
            {"internalType": "uint256", "name": "_amount", "type": "uint256"},
            {"internalType": "uint8", "name": "_season", "type": "uint8"},
            {"internalType": "uint256", "name": "_duration", "type": "uint256"},
            {"internalType": "bytes", "name": "_signature", "type": "bytes"},
        ],
        "name": "claim",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
]
