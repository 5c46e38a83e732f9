"""
Convenience script for running the question scraper.

Examples:
  python run_scraper.py https://www.examsnet.com/fulltest/upsc-cds-gs-history-questions-part-1 \
      -n 10 --subject GK --year 2024 --session I
  python run_scraper.py https://www.examsnet.com/question/cds-2019-ii-maths \
      -n 100 --subject Maths --year 2019 --session II --variant examsnet-image --url-style path --by-subject
"""

from qbank.services.question_scraper import main

if __name__ == "__main__":
    main()
