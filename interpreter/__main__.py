from interpreter.runner import main

main()
