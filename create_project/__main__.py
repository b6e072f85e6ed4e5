from create_project.pipeline import main

if __name__ == "__main__":
    main()
