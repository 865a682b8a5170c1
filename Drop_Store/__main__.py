import Drop_Store.cli.dr as dr_cli


def main():
    dr_cli.main()


if __name__ == "__main__":
    main()
