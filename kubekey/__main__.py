from kubekey.cli import main

main()
