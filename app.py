from learning_path_copilot.app.main import main

if __name__ == "__main__":
    main()
