"""Person, Parent and Child entities with graph export, audit and plotting."""
