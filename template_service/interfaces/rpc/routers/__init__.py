"""RPC method routers."""
