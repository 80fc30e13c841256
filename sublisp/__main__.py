from sublisp.repl import main

main()
