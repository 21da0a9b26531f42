from heygen_mcp.cli import main

main()
