from dotenv import load_dotenv
load_dotenv()

from base_claim.runner import main


if __name__ == "__main__":
    raise SystemExit(main())
