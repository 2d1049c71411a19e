from sft_minter.cli import main

if __name__ == "__main__":
    main()
