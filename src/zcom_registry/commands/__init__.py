"""
Command implementations for the zcom CLI.

Each module holds one or two top-level commands:
- token:    confirm-token
- cns:      register-cns
- contract: add-contract, update-contract
- ether:    provide-ether
- compile:  compile
"""
