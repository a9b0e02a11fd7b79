"""Command plugins, one handler per bot command."""