# Services package init
"""
School Records API: Services Layer
====================================

What:  The abstraction seam between routes (HTTP) and repositories (storage).
How:   SchoolService, ClassService and StudentService each wrap one
       repository and forward list_all / get_by_id / create / update /
       delete to it unchanged. They carry no business rules.
"""
