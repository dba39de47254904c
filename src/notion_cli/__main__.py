from notion_cli.main import main

main()
