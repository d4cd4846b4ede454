"""HTTP surface for the NFT actions service."""
