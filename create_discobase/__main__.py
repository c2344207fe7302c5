from create_discobase.pipeline import main

main()
