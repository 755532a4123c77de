from tinylisp.repl import main

main()
