from ddk_postinstall.cli import main

if __name__ == "__main__":
    main()
