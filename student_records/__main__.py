import sys

from student_records.main import main

sys.exit(main())
