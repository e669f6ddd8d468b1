"""Application layer - Use cases and orchestration.

Services validate caller input, delegate persistence to the repository
ports and report outcomes as Result values.

Structure:
- services/: CompanyService and EmployeeService

The application layer orchestrates domain logic but contains no storage code.
"""
